# Mean interval between successive new moons, in days
SYNODIC_MONTH = 29.53058770576

# Mean interval between successive perigees, in days
ANOMALISTIC_MONTH = 27.55454988

# Brown Lunation Number 1: first new moon of 1923, ~02:41 UTC January 17
LUNATION_BASE_JULIAN_DAY = 2423436.6115277777

# Known new moon, anchors the age percent
NEW_MOON_REFERENCE_JULIAN_DAY = 2451550.1

# Known perigee, anchors the distance approximation
PERIGEE_REFERENCE_JULIAN_DAY = 2451562.2

# Half of the synodic month; at or below this the moon is waxing
WAXING_AGE_LIMIT = 14.765

# Upper bounds (exclusive) of each phase, in days of lunar age.
# Each boundary sits at (2k + 1) / 16 of the synodic month so NEW is centred on age 0.
NEW_MOON_AGE_LIMIT = 1.84566173161
WAXING_CRESCENT_AGE_LIMIT = 5.53698519483
FIRST_QUARTER_AGE_LIMIT = 9.22830865805
WAXING_GIBBOUS_AGE_LIMIT = 12.91963212127
FULL_MOON_AGE_LIMIT = 16.61095558449
WANING_GIBBOUS_AGE_LIMIT = 20.30227904771
LAST_QUARTER_AGE_LIMIT = 23.99360251093
WANING_CRESCENT_AGE_LIMIT = 27.68492597415

# Mean Earth-Moon distance and the amplitudes of the three cosine terms, in Earth radii
MEAN_DISTANCE = 60.4
ANOMALY_AMPLITUDE = 3.3
EVECTION_AMPLITUDE = 0.6
VARIATION_AMPLITUDE = 0.5
