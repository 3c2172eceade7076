from enum import Enum


class Dimension(Enum):
    """Columns a user can break fatal percentages down by."""

    WEATHER = ("Weather", "WEATHERNAME")
    SPEED = ("Speed", "SPEED_RANGE")
    MONTH = ("Month", "MONTHNAME")
    DRUGS = ("Under the influence of drugs", "DRUGRESNAME")
    IMPAIRED = ("Driving impaired", "DRIMPAIRNAME")
    DISTRACTED = ("Driving distracted", "DRDISTRACTNAME")
    MAKE = ("Vehicle Make", "MAKENAME")
    ACCIDENT_TYPE = ("Accident Type", "HARM_EVNAME")

    def __init__(self, label, column):
        self.label = label
        self.column = column

    def values(self, traffic):
        return traffic[self.column]


class Mode(Enum):
    TOP_N = "Select Top N Categories"
    SPECIFIC = "Select Specific Categories"

    @property
    def label(self):
        return self.value


DIMENSION_OPTIONS = [{"label": d.label, "value": d.name} for d in Dimension]
MODE_OPTIONS = [{"label": m.label, "value": m.name} for m in Mode]
