"""
Composition over Inheritance - correct implementation

A Character is a bag of stats plus the abilities it was built with. Each
ability is defined once and any combination is one more factory call, so a
swimming, flying mage needs no new class.
"""

from dataclasses import dataclass, field
from typing import Dict


class Ability:
    name = ""

    def use(self, character: "Character", *args) -> str:
        raise NotImplementedError


class Walk(Ability):
    name = "walk"

    def use(self, character, *args):
        print("Walking...")
        return "Walking"


class Swim(Ability):
    name = "swim"

    def use(self, character, *args):
        print("Swimming...")
        return "Swimming"


class Fly(Ability):
    name = "fly"

    def use(self, character, *args):
        print("Flying...")
        return "Flying"


class Attack(Ability):
    name = "attack"

    def use(self, character, target):
        print(f"Attacking {target} with strength {character.strength}")
        return f"Attacked {target}"


class Defend(Ability):
    name = "defend"

    def use(self, character, *args):
        print(f"Defending with shield strength {character.defense}")
        return f"Defended with {character.defense} strength"


class CastSpell(Ability):
    name = "cast_spell"

    def __init__(self, airborne: bool = False):
        self.airborne = airborne

    def use(self, character, spell, target):
        where = " from the air" if self.airborne else ""
        print(f"Casting {spell} on {target}{where}")
        return f"Cast {spell}{where}"


@dataclass
class Character:
    name: str
    health: int = 100
    strength: int = 10
    defense: int = 10
    abilities: Dict[str, Ability] = field(default_factory=dict)

    def describe(self) -> str:
        return f"{self.name} - Health: {self.health}, Strength: {self.strength}, Defense: {self.defense}"

    def can(self, ability: str) -> bool:
        return ability in self.abilities

    def perform(self, ability: str, *args) -> str:
        if ability not in self.abilities:
            raise AttributeError(f"{self.name} cannot {ability}")
        return self.abilities[ability].use(self, *args)


def create_character(name: str, *abilities: Ability, **stats) -> Character:
    return Character(name, abilities={a.name: a for a in abilities}, **stats)


def create_warrior(name, **stats):
    return create_character(name, Walk(), Attack(), Defend(), **stats)


def create_mage(name, **stats):
    return create_character(name, Walk(), Attack(), CastSpell(), **stats)


def create_amphibious_warrior(name, **stats):
    return create_character(name, Walk(), Swim(), Attack(), Defend(), **stats)


def create_flying_mage(name, **stats):
    return create_character(name, Walk(), Fly(), Attack(), CastSpell(airborne=True), **stats)


def main():
    warrior = create_warrior("Aragorn", strength=20, defense=15)
    mage = create_mage("Gandalf", health=80, strength=5)
    amphibious = create_amphibious_warrior("Aquaman", strength=18)
    flying_mage = create_flying_mage("Storm", health=90)

    print(warrior.describe())
    warrior.perform("walk")
    warrior.perform("attack", "Orc")
    warrior.perform("defend")

    print(mage.describe())
    mage.perform("walk")
    mage.perform("cast_spell", "Fireball", "Dragon")

    print(amphibious.describe())
    amphibious.perform("swim")
    amphibious.perform("attack", "Sea monster")

    print(flying_mage.describe())
    flying_mage.perform("fly")
    flying_mage.perform("cast_spell", "Lightning", "Ground troops")

    print("\nA new combination is just a different set of parts:")
    hero = create_character("Wonder Woman", Walk(), Swim(), Fly(), Attack(), Defend(), strength=25)
    print(hero.describe())
    hero.perform("swim")
    hero.perform("fly")

    print("\nAbilities can be granted at runtime:")
    mage.abilities["swim"] = Swim()
    mage.perform("swim")

    try:
        warrior.perform("fly")
    except AttributeError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
