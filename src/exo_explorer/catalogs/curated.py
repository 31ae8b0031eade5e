"""Curated table of well-known confirmed exoplanets.

Bundled so the catalog is never empty, even with no network and no cache.
Units follow `PlanetRecord`: light-years, Earth radii/masses, days, AU, K,
solar masses, and linear solar luminosities.
"""

from __future__ import annotations

from exo_explorer.domain.planet import PlanetRecord

CURATED_SOURCE = "Curated catalog"

# name, system, distance, radius, mass, period, semi_major_axis, eq_temp,
# star_type, star_temp, star_mass, star_lum, discovered
_CURATED_ROWS: tuple[tuple, ...] = (
    ("TRAPPIST-1b", "TRAPPIST-1", 39.46, 1.116, 1.017, 1.511, 0.01154, 400, "M8V", 2566, 0.0898, 0.000553, 2016),
    ("TRAPPIST-1c", "TRAPPIST-1", 39.46, 1.097, 1.156, 2.422, 0.01580, 342, "M8V", 2566, 0.0898, 0.000553, 2016),
    ("TRAPPIST-1d", "TRAPPIST-1", 39.46, 0.788, 0.297, 4.050, 0.02227, 288, "M8V", 2566, 0.0898, 0.000553, 2016),
    ("TRAPPIST-1e", "TRAPPIST-1", 39.46, 0.920, 0.692, 6.101, 0.02925, 251, "M8V", 2566, 0.0898, 0.000553, 2017),
    ("TRAPPIST-1f", "TRAPPIST-1", 39.46, 1.045, 1.039, 9.207, 0.03849, 219, "M8V", 2566, 0.0898, 0.000553, 2017),
    ("TRAPPIST-1g", "TRAPPIST-1", 39.46, 1.129, 1.321, 12.35, 0.04683, 199, "M8V", 2566, 0.0898, 0.000553, 2017),
    ("TRAPPIST-1h", "TRAPPIST-1", 39.46, 0.755, 0.326, 18.77, 0.06189, 173, "M8V", 2566, 0.0898, 0.000553, 2017),
    ("Proxima Centauri b", "Proxima Centauri", 4.24, 1.03, 1.07, 11.186, 0.04857, 234, "M5.5V", 3042, 0.122, 0.00155, 2016),
    ("Proxima Centauri d", "Proxima Centauri", 4.24, 0.81, 0.26, 5.122, 0.02885, 360, "M5.5V", 3042, 0.122, 0.00155, 2022),
    ("Kepler-22b", "Kepler-22", 635, 2.38, 9.1, 289.86, 0.849, 262, "G5V", 5518, 0.97, 0.79, 2011),
    ("Kepler-442b", "Kepler-442", 1206, 1.34, 2.36, 112.3, 0.409, 233, "K5V", 4402, 0.61, 0.11, 2015),
    ("Kepler-452b", "Kepler-452", 1402, 1.63, 3.29, 384.8, 1.046, 265, "G2V", 5757, 1.037, 1.2, 2015),
    ("Kepler-186f", "Kepler-186", 582, 1.17, 1.71, 129.9, 0.432, 188, "M1V", 3788, 0.544, 0.041, 2014),
    ("Kepler-62e", "Kepler-62", 1200, 1.61, 4.5, 122.4, 0.427, 270, "K2V", 4925, 0.69, 0.21, 2013),
    ("Kepler-62f", "Kepler-62", 1200, 1.41, 2.8, 267.3, 0.718, 208, "K2V", 4925, 0.69, 0.21, 2013),
    ("Kepler-438b", "Kepler-438", 473, 1.12, 1.46, 35.23, 0.166, 276, "M0V", 3748, 0.544, 0.044, 2015),
    ("Kepler-296e", "Kepler-296", 737, 1.53, 3.0, 34.14, 0.169, 300, "M2V", 3504, 0.498, 0.035, 2014),
    ("K2-18b", "K2-18", 124, 2.61, 8.63, 32.94, 0.1429, 284, "M2.5V", 3457, 0.496, 0.028, 2015),
    ("TOI-700d", "TOI-700", 101.4, 1.19, 1.57, 37.42, 0.163, 269, "M2V", 3480, 0.415, 0.023, 2020),
    ("TOI-700e", "TOI-700", 101.4, 0.953, 0.818, 28.43, 0.134, 295, "M2V", 3480, 0.415, 0.023, 2023),
    ("LHS 1140b", "LHS 1140", 48.8, 1.73, 5.6, 24.73, 0.0946, 235, "M4.5V", 3216, 0.179, 0.00441, 2017),
    ("GJ 1061d", "GJ 1061", 11.98, 1.16, 1.64, 13.03, 0.054, 218, "M5.5V", 2953, 0.113, 0.00165, 2019),
    ("GJ 667Cc", "GJ 667C", 23.62, 1.54, 3.81, 28.14, 0.125, 277, "M1.5V", 3350, 0.33, 0.0137, 2011),
    ("Ross 128b", "Ross 128", 11.03, 1.10, 1.40, 9.866, 0.0496, 292, "M4V", 3192, 0.168, 0.00362, 2017),
    ("Wolf 1061c", "Wolf 1061", 14.05, 1.64, 3.41, 17.87, 0.084, 271, "M3V", 3342, 0.294, 0.00955, 2015),
    ("Teegarden's Star b", "Teegarden's Star", 12.5, 1.05, 1.05, 4.91, 0.0252, 264, "M7V", 2637, 0.089, 0.00073, 2019),
    ("Teegarden's Star c", "Teegarden's Star", 12.5, 1.04, 1.11, 11.41, 0.0443, 199, "M7V", 2637, 0.089, 0.00073, 2019),
    ("Tau Ceti e", "Tau Ceti", 11.91, 1.59, 3.93, 162.9, 0.538, 264, "G8.5V", 5344, 0.783, 0.488, 2017),
    ("Tau Ceti f", "Tau Ceti", 11.91, 1.69, 3.93, 636.1, 1.334, 167, "G8.5V", 5344, 0.783, 0.488, 2012),
    ("51 Pegasi b", "51 Pegasi", 50.9, 12.1, 150.8, 4.231, 0.052, 1284, "G4V", 5793, 1.11, 1.36, 1995),
    ("HD 209458b", "HD 209458", 159, 15.1, 220, 3.525, 0.047, 1449, "G0V", 6065, 1.148, 1.77, 1999),
    ("WASP-12b", "WASP-12", 1410, 20.9, 464, 1.091, 0.0234, 2580, "G0V", 6300, 1.434, 3.6, 2008),
    ("WASP-17b", "WASP-17", 1306, 22.1, 170, 3.735, 0.0515, 1771, "F6V", 6550, 1.306, 2.86, 2009),
    ("WASP-121b", "WASP-121", 881, 20.4, 376, 1.275, 0.0254, 2358, "F6V", 6459, 1.353, 2.91, 2015),
    ("WASP-76b", "WASP-76", 634, 20.6, 292, 1.810, 0.033, 2160, "F7V", 6329, 1.458, 3.33, 2013),
    ("WASP-39b", "WASP-39", 700, 14.3, 91, 4.055, 0.0486, 1166, "G7V", 5485, 0.93, 0.83, 2011),
    ("WASP-96b", "WASP-96", 1150, 13.5, 152, 3.426, 0.0453, 1285, "G8V", 5500, 1.06, 0.94, 2013),
    ("HAT-P-11b", "HAT-P-11", 123, 4.36, 25.8, 4.888, 0.053, 878, "K4V", 4780, 0.81, 0.26, 2009),
    ("GJ 1214b", "GJ 1214", 47.7, 2.68, 6.55, 1.580, 0.0149, 596, "M4.5V", 3026, 0.176, 0.00435, 2009),
    ("GJ 436b", "GJ 436", 31.8, 4.22, 21.4, 2.644, 0.0291, 712, "M3.5V", 3350, 0.452, 0.0253, 2004),
    ("HD 189733b", "HD 189733", 64.5, 12.7, 364, 2.219, 0.031, 1201, "K1V", 5040, 0.846, 0.328, 2005),
    ("CoRoT-7b", "CoRoT-7", 489, 1.58, 4.73, 0.854, 0.0172, 1810, "K0V", 5275, 0.93, 0.71, 2009),
    ("Kepler-10b", "Kepler-10", 608, 1.47, 4.56, 0.837, 0.01684, 1833, "G5V", 5708, 0.913, 0.81, 2011),
    ("Kepler-16b", "Kepler-16", 200, 8.45, 106, 228.8, 0.7048, 188, "K5V", 4450, 0.69, 0.15, 2011),
    ("Kepler-11b", "Kepler-11", 2150, 1.97, 4.3, 10.30, 0.091, 944, "G6V", 5680, 0.961, 1.05, 2011),
    ("Kepler-11c", "Kepler-11", 2150, 3.15, 13.5, 13.03, 0.106, 877, "G6V", 5680, 0.961, 1.05, 2011),
    ("Kepler-11d", "Kepler-11", 2150, 3.43, 6.1, 22.68, 0.159, 717, "G6V", 5680, 0.961, 1.05, 2011),
    ("Kepler-20e", "Kepler-20", 929, 0.87, 0.65, 6.099, 0.0507, 1040, "G8V", 5466, 0.912, 0.704, 2011),
    ("Kepler-20f", "Kepler-20", 929, 1.03, 0.78, 19.58, 0.1104, 705, "G8V", 5466, 0.912, 0.704, 2011),
    ("Kepler-37b", "Kepler-37", 209, 0.303, 0.02, 13.37, 0.1003, 700, "G8V", 5417, 0.803, 0.478, 2013),
    ("Kepler-78b", "Kepler-78", 406, 1.20, 1.86, 0.355, 0.0089, 2300, "K0V", 5089, 0.83, 0.49, 2013),
    ("Kepler-90h", "Kepler-90", 2840, 11.3, 203, 331.6, 1.01, 292, "G0V", 6080, 1.2, 1.95, 2013),
    ("Kepler-90g", "Kepler-90", 2840, 8.13, 76, 210.6, 0.71, 348, "G0V", 6080, 1.2, 1.95, 2013),
    ("Kepler-90i", "Kepler-90", 2840, 1.32, 2.5, 14.45, 0.1234, 837, "G0V", 6080, 1.2, 1.95, 2017),
    ("Kepler-1649c", "Kepler-1649", 301, 1.06, 1.2, 19.54, 0.0649, 234, "M5V", 3240, 0.1977, 0.00515, 2020),
    ("Kepler-1647b", "Kepler-1647", 3700, 12.0, 483, 1107, 2.72, 239, "F8V", 6210, 1.22, 2.02, 2016),
    ("HR 8799b", "HR 8799", 129, 12.0, 1750, 170000, 68, 870, "A5V", 7430, 1.56, 5.05, 2008),
    ("HR 8799c", "HR 8799", 129, 12.0, 2200, 66000, 38, 1100, "A5V", 7430, 1.56, 5.05, 2008),
    ("HR 8799d", "HR 8799", 129, 12.0, 2200, 37000, 24, 1200, "A5V", 7430, 1.56, 5.05, 2008),
    ("HR 8799e", "HR 8799", 129, 12.0, 2000, 18000, 14.5, 1150, "A5V", 7430, 1.56, 5.05, 2010),
    ("Beta Pictoris b", "Beta Pictoris", 63.4, 16.7, 3700, 7800, 9.0, 1724, "A6V", 8052, 1.797, 8.7, 2008),
    ("Beta Pictoris c", "Beta Pictoris", 63.4, 13.0, 2600, 1227, 2.68, 1250, "A6V", 8052, 1.797, 8.7, 2019),
    ("Fomalhaut b", "Fomalhaut", 25.13, 11.0, 950, 590000, 115, 50, "A3V", 8590, 1.92, 16.6, 2008),
    ("55 Cancri e", "55 Cancri", 41.1, 1.88, 8.08, 0.737, 0.0154, 2573, "G8V", 5196, 0.905, 0.582, 2004),
    ("GJ 876d", "GJ 876", 15.2, 1.24, 6.83, 1.938, 0.0208, 650, "M3.5V", 3129, 0.334, 0.0122, 2005),
    ("HD 40307g", "HD 40307", 42.3, 1.80, 7.09, 197.8, 0.60, 225, "K2.5V", 4977, 0.77, 0.23, 2012),
    ("Gliese 581d", "Gliese 581", 20.4, 1.62, 6.98, 66.64, 0.22, 220, "M3V", 3498, 0.31, 0.013, 2007),
    ("Gliese 581g", "Gliese 581", 20.4, 1.29, 3.1, 36.6, 0.146, 254, "M3V", 3498, 0.31, 0.013, 2010),
    ("HD 106906b", "HD 106906", 336, 13.5, 3500, 3500000, 738, 1800, "F5V", 6516, 1.37, 3.8, 2013),
    ("TOI-1452b", "TOI-1452", 100, 1.67, 4.82, 11.07, 0.061, 326, "M4V", 3185, 0.249, 0.00724, 2022),
    ("TOI-715b", "TOI-715", 137, 1.55, 3.02, 19.29, 0.083, 234, "M4V", 3075, 0.248, 0.0067, 2024),
    ("LP 890-9c", "LP 890-9", 105, 1.37, 2.5, 8.46, 0.0397, 272, "M6V", 2871, 0.118, 0.00143, 2022),
    ("GJ 357d", "GJ 357", 31, 1.55, 6.1, 55.66, 0.204, 220, "M2.5V", 3505, 0.342, 0.016, 2019),
    ("Kepler-1229b", "Kepler-1229", 770, 1.40, 2.7, 86.83, 0.2896, 213, "M4V", 3724, 0.54, 0.037, 2016),
    ("TOI-2257b", "TOI-2257", 188, 2.19, 5.5, 35.19, 0.145, 256, "M3V", 3441, 0.34, 0.0146, 2021),
    ("GJ 3470b", "GJ 3470", 29.5, 4.57, 13.9, 3.337, 0.036, 615, "M1.5V", 3652, 0.539, 0.029, 2012),
    ("HAT-P-26b", "HAT-P-26", 437, 6.33, 18.6, 4.235, 0.0479, 990, "K1V", 5079, 0.816, 0.41, 2010),
    ("KELT-9b", "KELT-9", 667, 21.2, 910, 1.481, 0.0346, 4050, "A0V", 10170, 2.52, 50.6, 2016),
    ("GJ 9827d", "GJ 9827", 97.3, 2.02, 4.04, 6.202, 0.0559, 680, "K6V", 4255, 0.606, 0.094, 2017),
    ("TOI-1431b", "TOI-1431", 490, 17.0, 1020, 2.650, 0.046, 2370, "A5V", 7670, 1.92, 8.4, 2021),
    ("WASP-189b", "WASP-189", 322, 18.1, 660, 2.724, 0.0501, 2641, "A6V", 8000, 2.03, 11.7, 2018),
    ("TOI-561b", "TOI-561", 280, 1.37, 1.59, 0.447, 0.0106, 2480, "G9V", 5372, 0.805, 0.47, 2021),
    ("Kepler-138d", "Kepler-138", 219, 1.51, 2.1, 23.09, 0.1286, 390, "M1V", 3841, 0.571, 0.054, 2014),
    ("GJ 486b", "GJ 486", 26.3, 1.31, 2.82, 1.467, 0.0173, 700, "M3.5V", 3340, 0.323, 0.0112, 2021),
    ("TOI-1075b", "TOI-1075", 200, 1.79, 9.95, 0.605, 0.011, 1860, "M0V", 3799, 0.605, 0.047, 2022),
    ("Kepler-34b", "Kepler-34", 4900, 8.56, 69.9, 288.8, 1.0896, 290, "G4V", 5913, 1.048, 1.39, 2012),
    ("Kepler-35b", "Kepler-35", 5400, 8.16, 40.4, 131.5, 0.6035, 395, "G1V", 5606, 0.888, 0.71, 2012),
    ("TOI-4600b", "TOI-4600", 815, 6.80, 56, 82.69, 0.304, 347, "K7V", 4105, 0.638, 0.085, 2023),
    ("TOI-4600c", "TOI-4600", 815, 9.42, 190, 482.8, 1.08, 184, "K7V", 4105, 0.638, 0.085, 2023),
    ("HD 80606b", "HD 80606", 190, 11.0, 1275, 111.4, 0.449, 420, "G5V", 5574, 0.97, 0.91, 2001),
    ("HD 149026b", "HD 149026", 257, 7.71, 114, 2.876, 0.0432, 1440, "G0V", 6147, 1.3, 2.72, 2005),
    ("Kepler-444b", "Kepler-444", 116, 0.403, 0.034, 3.600, 0.0418, 1046, "K0V", 5046, 0.758, 0.37, 2015),
    ("Kepler-444c", "Kepler-444", 116, 0.497, 0.052, 4.546, 0.0488, 966, "K0V", 5046, 0.758, 0.37, 2015),
    ("Kepler-444e", "Kepler-444", 116, 0.546, 0.064, 7.743, 0.070, 808, "K0V", 5046, 0.758, 0.37, 2015),
    ("Kepler-69c", "Kepler-69", 2430, 1.71, 6.0, 242.5, 0.64, 285, "G4V", 5638, 0.81, 0.65, 2013),
    ("Kepler-283c", "Kepler-283", 1743, 1.82, 5.9, 92.74, 0.341, 248, "K5V", 4351, 0.596, 0.077, 2014),
    ("Kepler-440b", "Kepler-440", 851, 1.86, 6.8, 101.1, 0.242, 273, "K0V", 4134, 0.568, 0.055, 2015),
    ("HD 85512b", "HD 85512", 36.4, 1.62, 3.6, 58.43, 0.26, 298, "K6V", 4715, 0.69, 0.126, 2011),
    ("GJ 180c", "GJ 180", 39.0, 1.80, 6.4, 24.33, 0.129, 238, "M2V", 3634, 0.43, 0.028, 2014),
    ("HD 219134b", "HD 219134", 21.25, 1.60, 4.74, 3.093, 0.0388, 1015, "K3V", 4699, 0.804, 0.265, 2015),
    ("Pi Mensae c", "Pi Mensae", 59.7, 2.04, 4.52, 6.268, 0.0684, 1170, "G0V", 6037, 1.094, 1.52, 2018),
    ("TOI-270d", "TOI-270", 73.2, 2.13, 5.4, 11.38, 0.0726, 388, "M3V", 3386, 0.386, 0.0147, 2019),
    ("Kepler-36c", "Kepler-36", 1530, 3.68, 7.13, 16.24, 0.1283, 826, "G1V", 5911, 1.071, 1.28, 2012),
    ("HIP 65426b", "HIP 65426", 385, 16.0, 2300, 205000, 92, 1560, "A2V", 8840, 1.96, 12.6, 2017),
    ("AF Leporis b", "AF Leporis", 87.5, 13.0, 950, 26000, 8.2, 800, "F8V", 6190, 1.2, 1.97, 2023),
    ("TOI-1338b", "TOI-1338", 1320, 6.85, 33, 95.17, 0.4607, 467, "G0V", 5940, 1.04, 1.13, 2020),
    ("Upsilon Andromedae d", "Upsilon Andromedae", 13.47, 13.0, 3248, 1276, 2.53, 236, "F9V", 6213, 1.27, 3.4, 1999),
)


def curated_planets() -> list[PlanetRecord]:
    """Fresh PlanetRecord instances for the curated table, tagged `curated=True`."""
    records: list[PlanetRecord] = []
    for row in _CURATED_ROWS:
        (
            name,
            system,
            distance,
            radius,
            mass,
            period,
            semi_major_axis,
            eq_temp,
            star_type,
            star_temp,
            star_mass,
            star_lum,
            discovered,
        ) = row
        records.append(
            PlanetRecord(
                name=name,
                system=system,
                distance=float(distance),
                radius=float(radius),
                mass=float(mass),
                period=float(period),
                semi_major_axis=float(semi_major_axis),
                eq_temp=eq_temp,
                star_type=star_type,
                star_temp=star_temp,
                star_mass=float(star_mass),
                star_lum=float(star_lum),
                discovered=discovered,
                source=CURATED_SOURCE,
                curated=True,
            )
        )
    return records


CURATED_COUNT = len(_CURATED_ROWS)
