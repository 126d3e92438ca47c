import re
import numpy as np
from lj_sweep.errors import InvalidNumber



# same prefixes the C library atof accepts, hexadecimal floats aside
_NUMERIC_PREFIX = re.compile(
    r'\s*([+-]?(?:infinity|inf|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?))',
    re.IGNORECASE
)


def parse_distance_bound(text: str, strict: bool = False):
    """
    Lenient string to float conversion: the longest numeric prefix
    is used and anything unparsable gives 0.0.

    With strict=True the whole string (surrounding whitespace aside)
    has to be a number, otherwise InvalidNumber is raised.
    """

    match = _NUMERIC_PREFIX.match(text)

    if strict:
        if match is None or match.end() != len(text.rstrip()):
            raise InvalidNumber(f'Not a number: {text!r}')

    if match is None:
        return 0.0

    return float(match.group(1))


def to_single_precision(value):
    # out of range values become +-inf, like a C float assignment
    with np.errstate(over='ignore'):
        return np.float32(value)


def format_sample(distance, potential):
    return f'r = {float(distance):f} Angstrom, V_lg = {float(potential):E} kJ/mol'
