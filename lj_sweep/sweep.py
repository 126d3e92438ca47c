import sys
import numpy as np
from lj_sweep.errors import UnboundedSweep
from lj_sweep.potential import (
    REFERENCE_PARAMETERS, LJ_potential_numba, potential_curve_setup
)
from lj_sweep.utils import to_single_precision, format_sample


HEADER = 'Lennard-Jones Potential'

# above this a float32 counter stops changing when incremented by 1
FLOAT32_STEP_LIMIT = np.float32(2**24)


class SweepRunner:
    def __init__(self, bound, parameters=REFERENCE_PARAMETERS, parallel=False):
        """
        Samples the potential on [-bound, bound) with a step of 1.
        The counter and the bound are single precision, the potential
        itself is computed in double precision.
        """

        self.bound = to_single_precision(bound)

        if self.bound > FLOAT32_STEP_LIMIT:
            raise UnboundedSweep(
                f'Bound {float(self.bound)} is too large to be swept with unit steps'
            )

        self.parameters = parameters
        self.potential_curve = potential_curve_setup(parallel)

    def distances(self):
        i = -self.bound
        step = np.float32(1.0)

        while i < self.bound:
            yield i
            i = np.float32(i + step)

    def samples(self):
        eps = float(self.parameters.epsilon)
        sigma = float(self.parameters.sigma)

        for i in self.distances():
            yield i, LJ_potential_numba(float(i), eps, sigma)

    def tabulate(self):
        distances = np.fromiter(self.distances(), dtype=np.float32)

        table = np.empty((len(distances), 2))
        table[:,0] = distances
        table[:,1] = self.potential_curve(
            distances.astype(np.float64),
            float(self.parameters.epsilon),
            float(self.parameters.sigma)
        )

        return table

    def run(self, out=None):
        if out is None:
            out = sys.stdout

        print(HEADER, file=out)

        N_lines = 0
        for distance, potential in self.samples():
            print(format_sample(distance, potential), file=out)
            N_lines += 1

        return N_lines
