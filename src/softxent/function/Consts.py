import math

SQRT_2 = math.sqrt(2)
SQRT_PI = math.sqrt(math.pi)
