"""
Base Shape Kernels

Closed-form landscapes evaluated on an already transformed vector z.
Every kernel has its global minimum 0 at z = 0; offsets such as the +1 of
Rosenbrock or the 420.97 of Schwefel are applied inside the kernel.

Constants follow the CEC 2013 / CEC 2014 technical reports.
"""

import math

import numpy as np

from ..transforms import index_ramp


def sphere(z: np.ndarray) -> float:
    """f(z) = sum z_i^2"""
    return float(np.sum(z * z))


def ellipsoidal(z: np.ndarray) -> float:
    """f(z) = sum 10^(6 r_i) z_i^2"""
    weights = np.power(10.0, 6.0 * index_ramp(z.shape[0]))
    return float(np.sum(weights * z * z))


def bent_cigar(z: np.ndarray) -> float:
    """f(z) = z_0^2 + 10^6 sum_{i>0} z_i^2"""
    return float(z[0] * z[0] + 1e6 * np.sum(z[1:] * z[1:]))


def discus(z: np.ndarray) -> float:
    """f(z) = 10^6 z_0^2 + sum_{i>0} z_i^2"""
    return float(1e6 * z[0] * z[0] + np.sum(z[1:] * z[1:]))


def different_powers(z: np.ndarray) -> float:
    """f(z) = sqrt(sum |z_i|^(2 + 4 r_i))"""
    exponents = 2.0 + 4.0 * index_ramp(z.shape[0])
    return float(np.sqrt(np.sum(np.power(np.abs(z), exponents))))


def rosenbrock(z: np.ndarray) -> float:
    """
    Rosenbrock on y = z + 1:
    f = sum_{i<n-1} 100 (y_i^2 - y_{i+1})^2 + (y_i - 1)^2
    """
    y = z + 1.0
    head, tail = y[:-1], y[1:]
    return float(np.sum(100.0 * (head * head - tail) ** 2 + (head - 1.0) ** 2))


def schaffer_f7(z: np.ndarray) -> float:
    """
    Schaffer's F7 (requires n >= 2):
    s_i = sqrt(z_i^2 + z_{i+1}^2)
    f = (1/(n-1) sum sqrt(s_i) (1 + sin^2(50 s_i^0.2)))^2
    """
    n = z.shape[0]
    s = np.sqrt(z[:-1] * z[:-1] + z[1:] * z[1:])
    t = np.sin(50.0 * np.power(s, 0.2))
    f = float(np.sum(np.sqrt(s) + np.sqrt(s) * t * t))
    return f * f / (n - 1) / (n - 1)


def ackley(z: np.ndarray) -> float:
    """f = -20 exp(-0.2 sqrt(mean z^2)) - exp(mean cos(2 pi z)) + 20 + e"""
    n = z.shape[0]
    sum1 = -0.2 * math.sqrt(float(np.sum(z * z)) / n)
    sum2 = float(np.sum(np.cos(2.0 * math.pi * z))) / n
    return math.e - 20.0 * math.exp(sum1) - math.exp(sum2) + 20.0


WEIERSTRASS_A = 0.5
WEIERSTRASS_B = 3.0
WEIERSTRASS_KMAX = 20


def weierstrass(z: np.ndarray) -> float:
    """
    f = sum_i sum_k a^k cos(2 pi b^k (z_i + 0.5)) - n sum_k a^k cos(pi b^k)
    with a = 0.5, b = 3, k = 0..20.
    """
    n = z.shape[0]
    k = np.arange(WEIERSTRASS_KMAX + 1, dtype=np.float64)
    ak = np.power(WEIERSTRASS_A, k)
    bk = np.power(WEIERSTRASS_B, k)
    terms = ak[None, :] * np.cos(2.0 * math.pi * bk[None, :] * (z[:, None] + 0.5))
    offset = float(np.sum(ak * np.cos(2.0 * math.pi * bk * 0.5)))
    return float(np.sum(terms)) - n * offset


def griewank(z: np.ndarray) -> float:
    """f = 1 + sum z_i^2 / 4000 - prod cos(z_i / sqrt(i + 1))"""
    idx = np.arange(1, z.shape[0] + 1, dtype=np.float64)
    s = float(np.sum(z * z))
    p = float(np.prod(np.cos(z / np.sqrt(idx))))
    return 1.0 + s / 4000.0 - p


def rastrigin(z: np.ndarray) -> float:
    """f = sum z_i^2 - 10 cos(2 pi z_i) + 10"""
    return float(np.sum(z * z - 10.0 * np.cos(2.0 * math.pi * z) + 10.0))


SCHWEFEL_SHIFT = 4.209687462275036e+002
SCHWEFEL_OFFSET = 4.189828872724338e+002


def schwefel(z: np.ndarray) -> float:
    """
    Modified Schwefel on y = z + 420.9687...

    Inside [-500, 500]: -y sin(sqrt|y|). Outside, the coordinate is folded
    back into the box and a quadratic penalty ((|y| - 500) / 100)^2 / n is
    added.
    """
    n = z.shape[0]
    y = z + SCHWEFEL_SHIFT
    f = 0.0

    hi = y > 500.0
    if np.any(hi):
        m = np.fmod(y[hi], 500.0)
        f -= float(np.sum((500.0 - m) * np.sin(np.sqrt(500.0 - m))))
        f += float(np.sum(((y[hi] - 500.0) / 100.0) ** 2)) / n

    lo = y < -500.0
    if np.any(lo):
        m = np.fmod(np.abs(y[lo]), 500.0)
        f -= float(np.sum((-500.0 + m) * np.sin(np.sqrt(500.0 - m))))
        f += float(np.sum(((y[lo] + 500.0) / 100.0) ** 2)) / n

    mid = ~(hi | lo)
    f -= float(np.sum(y[mid] * np.sin(np.sqrt(np.abs(y[mid])))))

    return SCHWEFEL_OFFSET * n + f


def katsuura(z: np.ndarray) -> float:
    """
    f = 10/n^2 prod_i (1 + (i+1) sum_{j=1}^{32} |2^j z_i - round(2^j z_i)| / 2^j)^(10/n^1.2)
        - 10/n^2
    """
    n = z.shape[0]
    two_j = np.power(2.0, np.arange(1, 33, dtype=np.float64))
    t = two_j[None, :] * z[:, None]
    inner = np.sum(np.abs(t - np.floor(t + 0.5)) / two_j[None, :], axis=1)
    idx = np.arange(1, n + 1, dtype=np.float64)
    f = float(np.prod(np.power(1.0 + idx * inner, 10.0 / math.pow(n, 1.2))))
    scale = 10.0 / n / n
    return f * scale - scale


LUNACEK_MU0 = 2.5
LUNACEK_D = 1.0


def lunacek(xhat: np.ndarray, z: np.ndarray) -> float:
    """
    Lunacek bi-Rastrigin.

    Args:
        xhat: Sign-adjusted coordinates offset by mu0, selecting between the
            bowl around mu0 and the secondary bowl around mu1
        z: Conditioned coordinates feeding the cosine penalty

    Returns:
        min(sum (xhat - mu0)^2, d n + s sum (xhat - mu1)^2)
        + 10 (n - sum cos(2 pi z))
    """
    n = z.shape[0]
    s = 1.0 - 1.0 / (2.0 * math.sqrt(n + 20.0) - 8.2)
    mu1 = -math.sqrt((LUNACEK_MU0 * LUNACEK_MU0 - LUNACEK_D) / s)
    near = float(np.sum((xhat - LUNACEK_MU0) ** 2))
    far = s * float(np.sum((xhat - mu1) ** 2)) + LUNACEK_D * n
    penalty = 10.0 * (n - float(np.sum(np.cos(2.0 * math.pi * z))))
    return min(near, far) + penalty


def griewank_rosenbrock(z: np.ndarray) -> float:
    """
    Expanded Griewank-plus-Rosenbrock on y = z + 1, pairing (y_i, y_{i+1})
    with a wrap-around pair (y_{n-1}, y_0):
    t = 100 (y_i^2 - y_{i+1})^2 + (y_i - 1)^2,  f = sum t^2/4000 - cos(t) + 1
    """
    y = z + 1.0
    nxt = np.roll(y, -1)
    t = 100.0 * (y * y - nxt) ** 2 + (y - 1.0) ** 2
    return float(np.sum(t * t / 4000.0 - np.cos(t) + 1.0))


def expanded_scaffer_f6(z: np.ndarray) -> float:
    """
    Expanded Scaffer F6 with wrap-around pair:
    g(a, b) = 0.5 + (sin^2(sqrt(a^2 + b^2)) - 0.5) / (1 + 0.001 (a^2 + b^2))^2
    """
    nxt = np.roll(z, -1)
    r2 = z * z + nxt * nxt
    s = np.sin(np.sqrt(r2))
    d = 1.0 + 0.001 * r2
    return float(np.sum(0.5 + (s * s - 0.5) / (d * d)))


def happycat(z: np.ndarray) -> float:
    """
    HappyCat, alpha = 1/8, optimum moved from -1 to the origin:
    f = |r2 - n|^(2 alpha) + (0.5 r2 + sum y) / n + 0.5 with y = z - 1.
    """
    n = z.shape[0]
    y = z - 1.0
    r2 = float(np.sum(y * y))
    sum_y = float(np.sum(y))
    return math.pow(abs(r2 - n), 2.0 * 0.125) + (0.5 * r2 + sum_y) / n + 0.5


def hgbat(z: np.ndarray) -> float:
    """
    HGBat, alpha = 1/4, optimum moved from -1 to the origin:
    f = |r2^2 - (sum y)^2|^(2 alpha) + (0.5 r2 + sum y) / n + 0.5 with y = z - 1.
    """
    n = z.shape[0]
    y = z - 1.0
    r2 = float(np.sum(y * y))
    sum_y = float(np.sum(y))
    return math.pow(abs(r2 * r2 - sum_y * sum_y), 2.0 * 0.25) + (0.5 * r2 + sum_y) / n + 0.5
