DIMENSIONS = ("width", "height", "depth")

MIN_DIMENSION_MM = 0.1
MAX_DIMENSION_MM = 2400.0
LARGE_DIMENSION_THRESHOLD_MM = 1200.0
CONSTRAINED_MAX_DIMENSION_MM = 1200.0
DEFAULT_DIMENSION_MM = 1000.0
DIMENSION_STEP_MM = 0.1

MIN_QUANTITY = 1
DEFAULT_QUANTITY = 1

MIN_WEIGHT_KG = 0.1
WEIGHT_STEP_KG = 0.1
DEFAULT_WEIGHT_KG = 1.0

MM_PER_METER = 1000
