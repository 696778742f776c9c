from enums import GeneratorType, GENERATOR_NAMES
from generator import Generator


class CombineGenerator(Generator):
    """Subtraction-combine of two generators, taken mod 1.

    Both wrapped generators stay owned by the caller and are advanced on
    every call, so they must outlive the combiner and anyone else drawing
    from them sees the shared progress.
    """

    name = GENERATOR_NAMES[GeneratorType.COMBINE]

    def __init__(self, gen_x: Generator, gen_y: Generator):
        self.gen_x = gen_x
        self.gen_y = gen_y

    def next(self):
        x = self.gen_x.next()
        y = self.gen_y.next()
        difference = x - y
        if difference < 0.0:
            difference += 1.0
        return difference

    def __repr__(self):
        return f"CombineGenerator({self.gen_x!r}, {self.gen_y!r})"
