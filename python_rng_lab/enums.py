from enum import Enum


class Result(Enum):
    OK = "eOk"
    INVALID_INPUT = "eInvalidInput"
    EXIT = "eExit"


class GeneratorType(Enum):
    LINEAR = 1
    QUADRATIC = 2
    FIBONACCI = 3
    INVERSE = 4
    COMBINE = 5
    THREE_SIGMA = 6
    POLAR = 7


class DistributionKind(Enum):
    UNIFORM = "uniform"
    NORMAL = "normal"


GENERATOR_NAMES = {
    GeneratorType.LINEAR: "Linear",
    GeneratorType.QUADRATIC: "Quadratic",
    GeneratorType.FIBONACCI: "Fibonacci",
    GeneratorType.INVERSE: "Inverse",
    GeneratorType.COMBINE: "Combine",
    GeneratorType.THREE_SIGMA: "Three sigma",
    GeneratorType.POLAR: "Polar coordinates",
}
