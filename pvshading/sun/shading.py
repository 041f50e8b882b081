"""
Row-to-row shading of collectors that are arranged in long parallel rows
(sheds) on a horizontal plane.

All calculations are done in the vertical plane perpendicular to the rows.
Points used below:

    A   foot of the collector row that is being shaded
    C   top edge of the row in front of it
    A'  point on the shaded row where the shadow of C ends

The angle between the horizontal and the line AC is the shading limit angle:
as long as the profile angle of the sun is larger than this angle, the
shadow of the front row does not reach the next row.

References
----------
Duffie, J. A., Beckman, W. A., & Blair, N. (2020). SOLAR ENGINEERING OF
THERMAL PROCESSES, PHOTOVOLTAICS AND WIND. John Wiley & Sons. Example 1.9.3.
"""
import numpy as np


def shading_limit_angle(
    beta: float,
    bandwidth: float,
    pitch: float
) -> float:
    """Returns the shading limit angle in radians of rows of collectors.

    Parameters
    ----------
    beta: radians
        Slope of the collectors.
    bandwidth: m
        Width of a collector row measured along its sloped surface.
    pitch: m
        Horizontal distance between the feet of two successive rows.
    """
    height = bandwidth * np.sin(beta)
    gap = pitch - bandwidth * np.cos(beta)
    return float(np.arctan2(height, gap))


def shaded_length(
    beta: float,
    bandwidth: float,
    psi: float,
    alpha_p: float
) -> float:
    """Returns the length AA' in meters of the shaded part of a collector
    row, measured along the collector surface from its foot.

    Parameters
    ----------
    beta: radians
        Slope of the collectors.
    bandwidth: m
        Width of a collector row measured along its sloped surface.
    psi: radians
        Shading limit angle of the rows.
    alpha_p: radians
        Profile angle of the sun; must be smaller than `psi`.

    Notes
    -----
    In triangle A-C-A' the side AC and the three angles are known, so that
    AA' follows from the law of sines.
    """
    AC = np.sin(beta) * bandwidth / np.sin(psi)
    CAAp = np.pi - psi - beta
    CApA = np.pi - CAAp - (psi - alpha_p)
    ACAp = np.pi - CAAp - CApA
    AAp = AC * np.sin(ACAp) / np.sin(CApA)
    return float(AAp)


if __name__ == '__main__':

    from pvshading import Quantity
    from pvshading.sun.geometry import profile_angle

    Q_ = Quantity

    beta = Q_(30.0, 'deg').to('rad').m
    W = 2.0
    P = 4.0
    psi = shading_limit_angle(beta, W, P)
    alpha_p = profile_angle(Q_(15.0, 'deg').to('rad').m, 0.0, 0.0)

    print(
        f"shading limit angle = {Q_(psi, 'rad').to('deg'):~P.1f}\n"
        f"profile angle = {Q_(alpha_p, 'rad').to('deg'):~P.1f}\n"
        f"shaded length = {shaded_length(beta, W, psi, alpha_p):.3f} m"
    )
