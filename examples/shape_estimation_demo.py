import numpy as np
import matplotlib.pyplot as plt
from mwm import ScaleParameters, mwm_synthesize, mwm_estimate

depth = 14
true_shapes = np.linspace(0.5, 20.0, depth)
params = ScaleParameters(shapes=true_shapes, root_mean=1.0)

x = mwm_synthesize(params, rng=0)
fit = mwm_estimate(x)

for j, (p, p_hat) in enumerate(zip(true_shapes, fit.shapes)):
    print(f"level {j:2d}: true p = {p:6.2f}  estimated p = {p_hat:8.2f}")

plt.semilogy(true_shapes, 'ko-', label='true')
plt.semilogy(fit.shapes, 'r^', label='estimated')
plt.xlabel('Level j')
plt.ylabel('Shape p_j')
plt.legend()
plt.show()
