import random
from typing import Optional

from space_gallery.components.tree import Node, element

SPACE_FACTS = [
    "Did you know the footprints on the Moon will likely remain for millions of years because there's no wind to erase them?",
    "A day on Venus is longer than a year on Venus — it rotates very slowly compared to its orbit.",
    "Neutron stars are so dense that a teaspoon of neutron star material would weigh about a billion tons on Earth.",
    "There are thousands of exoplanets discovered outside our solar system; some orbit two stars at once.",
    "Jupiter's magnetic field is 20,000 times stronger than Earth's — it traps intense radiation belts.",
    "Space is not completely empty — there are particles, radiation, and tiny amounts of gas between stars.",
]

FACT_LABEL = "Did you know?"
FACT_FOOTER = "— A fun space fact"


def pick_fact(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(SPACE_FACTS)


def show_random_fact(region: Optional[Node], rng: Optional[random.Random] = None) -> Optional[str]:
    """Write one random fact into the fact region; returns the fact shown."""
    if region is None:
        return None
    fact = pick_fact(rng)
    region.clear()
    region.append(element("strong", text=FACT_LABEL))
    region.append(element("span", text=f" {fact} "))
    region.append(element("small", text=FACT_FOOTER))
    return fact
