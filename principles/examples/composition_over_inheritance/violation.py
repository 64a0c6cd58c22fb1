"""
Composition over Inheritance - violation

Every combination of abilities is a new subclass. swim() and fly() are
copied into several branches, and a warrior that can swim and fly needs yet
another class stacked on top of the others.
"""


class Character:
    def __init__(self, name):
        self.name = name
        self.health = 100
        self.strength = 10
        self.defense = 10

    def describe(self):
        return f"{self.name} - Health: {self.health}, Strength: {self.strength}, Defense: {self.defense}"

    def walk(self):
        print("Walking...")
        return "Walking"


class Warrior(Character):
    def __init__(self, name):
        super().__init__(name)
        self.strength = 20
        self.defense = 15

    def attack(self, target):
        print(f"Attacking {target} with strength {self.strength}")
        return f"Attacked {target}"

    def defend(self):
        print(f"Defending with shield strength {self.defense}")
        return f"Defended with {self.defense} strength"


class Mage(Character):
    def __init__(self, name):
        super().__init__(name)
        self.health = 80
        self.strength = 5

    # copied from Warrior
    def attack(self, target):
        print(f"Attacking {target} with strength {self.strength}")
        return f"Attacked {target}"

    def cast_spell(self, spell, target):
        print(f"Casting {spell} on {target}")
        return f"Cast {spell}"


class SwimmingWarrior(Warrior):
    def swim(self):
        print("Swimming...")
        return "Swimming"


class FlyingWarrior(Warrior):
    def fly(self):
        print("Flying...")
        return "Flying"


class SwimmingMage(Mage):
    def swim(self):
        print("Swimming...")
        return "Swimming"


class FlyingMage(Mage):
    def fly(self):
        print("Flying...")
        return "Flying"

    def cast_spell(self, spell, target):
        print(f"Casting {spell} on {target} from the air")
        return f"Cast {spell} from air"


class SwimmingFlyingWarrior(SwimmingWarrior):
    # fly() copied a third time
    def fly(self):
        print("Flying...")
        return "Flying"


def main():
    warrior = Warrior("Aragorn")
    mage = Mage("Gandalf")
    swimming_warrior = SwimmingWarrior("Aquaman")
    flying_mage = FlyingMage("Storm")
    swimming_flying_warrior = SwimmingFlyingWarrior("Wonder Woman")

    print(warrior.describe())
    warrior.walk()
    warrior.attack("Orc")
    warrior.defend()

    print(mage.describe())
    mage.walk()
    mage.cast_spell("Fireball", "Dragon")

    print(swimming_warrior.describe())
    swimming_warrior.swim()
    swimming_warrior.attack("Sea monster")

    print(flying_mage.describe())
    flying_mage.fly()
    flying_mage.cast_spell("Lightning", "Ground troops")

    print(swimming_flying_warrior.describe())
    swimming_flying_warrior.swim()
    swimming_flying_warrior.fly()

    print("\nStats are fixed by the class, so a stronger Aquaman needs another subclass:")
    print(swimming_warrior.describe())

    classes = [Character, Warrior, Mage, SwimmingWarrior, FlyingWarrior, SwimmingMage,
               FlyingMage, SwimmingFlyingWarrior]
    print(f"\n{len(classes)} classes for 5 abilities, and a swimming flying mage still does not exist")
    print("MRO of SwimmingFlyingWarrior:", " -> ".join(c.__name__ for c in SwimmingFlyingWarrior.__mro__))


if __name__ == "__main__":
    main()
