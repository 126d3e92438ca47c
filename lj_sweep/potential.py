import numpy as np
import numba



class LJParameters:
    def __init__(self, epsilon, sigma):
        """
        epsilon: depth of the potential well (energy units)
        sigma: distance at which the potential crosses zero (length units)
        """
        self.epsilon = epsilon
        self.sigma = sigma

    def __repr__(self):
        return f'LJParameters(epsilon={self.epsilon!r}, sigma={self.sigma!r})'


# kJ/mol and Angstrom, stored in single precision and widened to double
REFERENCE_PARAMETERS = LJParameters(
    epsilon=float(np.float32(19.8)),
    sigma=float(np.float32(3.38))
)


@numba.jit(nopython=True, error_model='numpy')
def LJ_potential_numba(r, eps, sigma):
    """
    V(r) = 4*eps*((sigma/r)^12 - (sigma/r)^6)

    Factorized as 4*eps*s6*(s6-1) so that r=0 gives +inf
    instead of inf-inf=nan.
    """

    sigma_over_r_6 = np.power(sigma/r, 6)

    return 4 * eps * sigma_over_r_6 * (sigma_over_r_6 - 1)


def lennard_jones(r, parameters=REFERENCE_PARAMETERS):
    return LJ_potential_numba(
        float(r),
        float(parameters.epsilon),
        float(parameters.sigma)
    )


def potential_curve_setup(parallel):

    @numba.jit(nopython=True, parallel=parallel, error_model='numpy')
    def potential_curve(distances, eps, sigma):
        N_samples = distances.shape[0]
        energies = np.zeros(N_samples)

        for k in numba.prange(N_samples):
            energies[k] = LJ_potential_numba(distances[k], eps, sigma)

        return energies

    return potential_curve


def minimum_distance(parameters):
    return parameters.sigma * 2**(1/6)
