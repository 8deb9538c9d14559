"""
Five-element cycle.

Elements are assigned by the last digit of a year. Two fixed five-step
cycles relate them: the generating cycle and the destroying cycle.
"""
from alignment.models import Element

GENERATES = {
    Element.WOOD:  Element.FIRE,
    Element.FIRE:  Element.EARTH,
    Element.EARTH: Element.METAL,
    Element.METAL: Element.WATER,
    Element.WATER: Element.WOOD,
}

DESTROYS = {
    Element.WOOD:  Element.EARTH,
    Element.EARTH: Element.WATER,
    Element.WATER: Element.FIRE,
    Element.FIRE:  Element.METAL,
    Element.METAL: Element.WOOD,
}


def element_for_year(year: int) -> Element:
    """
    Last digit of the year:
      0–1 Metal, 2–3 Water, 4–5 Wood, 6–7 Fire, 8–9 Earth
    """
    last = year % 10
    if last in (0, 1):
        return Element.METAL
    if last in (2, 3):
        return Element.WATER
    if last in (4, 5):
        return Element.WOOD
    if last in (6, 7):
        return Element.FIRE
    return Element.EARTH
