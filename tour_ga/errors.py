class TourGAError(Exception):
    """Base class for errors raised by tour_ga."""


class ConfigurationError(TourGAError, ValueError):
    pass


class MissingDistanceError(TourGAError, KeyError):
    def __init__(self, a: int, b: int):
        super().__init__((a, b))
        self.a = a
        self.b = b

    def __str__(self) -> str:
        if self.a == self.b:
            return f"no distance from city {self.a} to itself"
        return f"no distance between cities {self.a} and {self.b}"


class MapFileError(TourGAError, OSError):
    pass


class MapFormatError(TourGAError, ValueError):
    pass
