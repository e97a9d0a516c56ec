# SPDX-FileCopyrightText: Copyright 2026, Siavash Ameli <sameli@berkeley.edu>
# SPDX-License-Identifier: BSD-3-Clause
# SPDX-FileType: SOURCE
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the license found in the LICENSE.txt file in the root directory
# of this source tree.


# =======
# Imports
# =======

import numpy
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Wedge
import texplot
from .._ztransform import ROCType

__all__ = ['plot_pole_zero', 'plot_frequency_response']


# ===========
# save status
# ===========

def _save_status(save, default_filename):
    """
    Whether to save, and the filename to save to.
    """

    if save is False:
        save_status = False
        save_filename = ''
    else:
        save_status = True
        if isinstance(save, str):
            save_filename = save
        else:
            save_filename = default_filename

    return save_status, save_filename


# ==============
# plot pole zero
# ==============

def plot_pole_zero(zeros, poles, roc=None, title='Pole-Zero Plot',
                   latex=False, save=False):
    """
    Plot zeros and poles on the z-plane with the unit circle.

    Parameters
    ----------

    zeros : array_like
        Zeros, plotted as circles.

    poles : array_like
        Poles, plotted as crosses.

    roc : zplane.ROC, default=None
        If given, the region of convergence is shaded and its finite
        boundary radii are drawn as dashed circles.

    title : str, default='Pole-Zero Plot'
        Title of the plot.

    latex : bool, default=False
        If `True`, the plot is rendered with LaTeX.

    save : bool or str, default=False
        If `True`, the plot is saved to ``pole_zero.pdf``. A string sets the
        filename. If `False`, the plot is shown.
    """

    zeros = numpy.asarray(zeros, dtype=complex).ravel()
    poles = numpy.asarray(poles, dtype=complex).ravel()

    # Plot extent covers the unit circle, all roots and finite ROC radii
    radii = [1.0]
    radii.extend(numpy.abs(zeros))
    radii.extend(numpy.abs(poles))
    if roc is not None:
        radii.extend([r for r in (roc.inner_radius, roc.outer_radius)
                      if numpy.isfinite(r)])
    extent = 1.25 * max(radii)

    with texplot.theme(use_latex=latex):

        fig, ax = plt.subplots(figsize=(4.5, 4.5))

        if (roc is not None) and (roc.type != ROCType.NONE):
            inner = roc.inner_radius
            outer = min(roc.outer_radius, 2.0 * extent)
            ax.add_patch(Wedge((0.0, 0.0), outer, 0.0, 360.0,
                               width=outer - inner, color='silver',
                               alpha=0.4, linewidth=0, zorder=-2,
                               label='ROC: ' + roc.description))

            for r in (roc.inner_radius, roc.outer_radius):
                if numpy.isfinite(r) and r > 0.0:
                    ax.add_patch(Circle((0.0, 0.0), r, fill=False,
                                        linestyle='--', linewidth=0.8,
                                        color='dimgray', zorder=-1))

        ax.add_patch(Circle((0.0, 0.0), 1.0, fill=False, linewidth=0.8,
                            color='black', zorder=-1))
        ax.axhline(0, linewidth=0.5, color='gray', zorder=-1)
        ax.axvline(0, linewidth=0.5, color='gray', zorder=-1)

        if zeros.size > 0:
            ax.plot(zeros.real, zeros.imag, 'o', markersize=6,
                    markerfacecolor='none', markeredgecolor='black',
                    label='Zeros')
        if poles.size > 0:
            ax.plot(poles.real, poles.imag, 'x', markersize=7,
                    color='firebrick', label='Poles')

        ax.set_xlim([-extent, extent])
        ax.set_ylim([-extent, extent])
        ax.set_aspect('equal')
        ax.set_xlabel(r'$\mathrm{Re}(z)$')
        ax.set_ylabel(r'$\mathrm{Im}(z)$')
        ax.set_title(title)

        if (zeros.size > 0) or (poles.size > 0) or (roc is not None):
            ax.legend(loc='best', fontsize='x-small')

        save_status, save_filename = _save_status(save, 'pole_zero.pdf')
        texplot.show_or_save_plot(plt, default_filename=save_filename,
                                  transparent_background=True, dpi=400,
                                  show_and_save=save_status, verbose=True)


# =======================
# plot frequency response
# =======================

def plot_frequency_response(response, title='Frequency Response',
                            latex=False, save=False):
    """
    Plot the magnitude in decibels and the unwrapped phase of a frequency
    response.

    Parameters
    ----------

    response : zplane.FrequencyResponse
        Output of :func:`zplane.calculate_frequency_response`.

    title : str, default='Frequency Response'
        Title of the plot.

    latex : bool, default=False
        If `True`, the plot is rendered with LaTeX.

    save : bool or str, default=False
        If `True`, the plot is saved to ``frequency_response.pdf``. A string
        sets the filename. If `False`, the plot is shown.
    """

    omega = numpy.asarray(response.frequencies)
    magnitude = numpy.asarray(response.magnitude)

    with numpy.errstate(divide='ignore', invalid='ignore'):
        magnitude_db = 20.0 * numpy.log10(magnitude)

    with texplot.theme(use_latex=latex):

        fig, ax = plt.subplots(nrows=2, figsize=(6, 4.5), sharex=True)

        ax[0].plot(omega, magnitude_db, color='black')
        ax[0].set_ylabel(r'$20 \log_{10} |H(e^{i \omega})|$ (dB)')
        ax[0].set_title(title)

        ax[1].plot(omega, response.phase, color='black')
        ax[1].set_ylabel(r'$\arg H(e^{i \omega})$ (rad)')
        ax[1].set_xlabel(r'$\omega$')
        ax[1].set_xlim([omega[0], omega[-1]])

        for a in ax:
            a.grid(True, linewidth=0.4, color='lightgray')

        save_status, save_filename = _save_status(save,
                                                  'frequency_response.pdf')
        texplot.show_or_save_plot(plt, default_filename=save_filename,
                                  transparent_background=True, dpi=400,
                                  show_and_save=save_status, verbose=True)
