# Source: "SOLAR ENGINEERING OF THERMAL PROCESSES, PHOTOVOLTAICS AND WIND"
# (5th. Ed.) by John A. Duffie and William A. Beckman, §1.6 and §1.9.
import numpy as np


def solar_altitude_angle(theta_z: float | np.ndarray) -> float | np.ndarray:
    """Returns the altitude angle of the sun in radians, being the complement
    of the zenith angle `theta_z` (radians).
    """
    alpha_s_ = np.pi / 2 - theta_z
    return alpha_s_


def profile_angle(
    alpha_s: float | np.ndarray,
    gamma_s: float | np.ndarray,
    gamma: float | np.ndarray
) -> float | np.ndarray:
    """Returns the profile angle of beam radiation on a receiver plane.

    The profile angle is the projection of the solar altitude angle on a
    vertical plane perpendicular to the plane of the receiver (i.e. the plane
    that contains the surface azimuth).

    Parameters
    ----------
    alpha_s: radians
        the solar altitude angle, which is the complement of the zenith angle
    gamma_s: radians
        the solar azimuth angle
    gamma: radians
        surface azimuth angle, with zero due south, east negative, and west
        positive; -pi <= gamma <= pi.

    Notes
    -----
    The formula is only meaningful when the sun is in front of the receiver,
    i.e. when abs(gamma_s - gamma) < pi / 2.

    Returns
    -------
    the profile angle in radians
    """
    alpha_p_ = np.arctan(
        np.tan(alpha_s) / np.cos(gamma_s - gamma)
    )
    return alpha_p_


def sun_in_front(
    theta_z: float,
    gamma_s: float,
    gamma: float
) -> bool:
    """Returns True if the sun is above the horizon and in front of a surface
    with azimuth angle `gamma`. All angles in radians.
    """
    if theta_z > np.pi / 2:
        return False
    if abs(gamma_s - gamma) > np.pi / 2:
        return False
    return True
