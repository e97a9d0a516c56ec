# Install ;#\zplane#; with ;#"\texttt{pip install \zplane}"#;
import zplane as zp

# Z-transform of the causal exponential ;#$ x[n] = a^n u[n] $#; with ;#$ a = 0.8 $#;
zt = zp.get_common_z_transform('exponential', a=0.8)

# Pole at ;#$ z = a $#; and region of convergence ;#$ |z| > 0.8 $#;
print(zt.poles, zt.roc.description)

# Factor a second order resonator ;#$ H(z) = \frac{1 + z^{-1}}{1 - 1.2 z^{-1} + 0.72 z^{-2}} $#;
fact = zp.factorize_z_transform([1, 1, 0], [1, -1.2, 0.72], plot=True)
print(fact.expression, fact.roc.description)

# Roots of a degree ;#$ 20 $#; polynomial with automatic method selection and a fixed seed
result = zp.find_roots([1] + [0] * 19 + [-1], seed=0)
print(result.method, result.verified)

# Frequency response on ;#$ 0 \leq \omega \leq \pi $#;
response = zp.calculate_frequency_response(
    {'numerator': [1, 1], 'denominator': [1, -1.2, 0.72]})
zp.visualization.plot_frequency_response(response)
