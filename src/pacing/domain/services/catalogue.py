from __future__ import annotations

from collections.abc import Sequence

from pacing.domain.models.catalogue import (
    ALL_STATS,
    CharacterClass,
    EquipmentPreset,
    Monster,
    Race,
    Stat,
)


class CatalogueError(ValueError):
    """Raised when the static reference tables are incomplete."""


RACES: tuple[Race, ...] = (
    Race("Half Orc", (Stat.HP_MAX,)),
    Race("Half Man", (Stat.CHARISMA,)),
    Race("Half Halfling", (Stat.DEXTERITY,)),
    Race("Double Hobbit", (Stat.STRENGTH,)),
    Race("Hob-Hobbit", (Stat.DEXTERITY, Stat.CONDITION)),
    Race("Low Elf", (Stat.CONDITION,)),
    Race("Dung Elf", (Stat.WISDOM,)),
    Race("Talking Pony", (Stat.MP_MAX, Stat.INTELLIGENCE)),
    Race("Gyrognome", (Stat.DEXTERITY,)),
    Race("Lesser Dwarf", (Stat.CONDITION,)),
    Race("Crested Dwarf", (Stat.CHARISMA,)),
    Race("Eel Man", (Stat.DEXTERITY,)),
    Race("Panda Man", (Stat.CONDITION, Stat.STRENGTH)),
    Race("Trans-Kobold", (Stat.WISDOM,)),
    Race("Enchanted Motorcycle", (Stat.MP_MAX,)),
    Race("Will o' the Wisp", (Stat.WISDOM,)),
    Race("Battle-Finch", (Stat.DEXTERITY, Stat.INTELLIGENCE)),
    Race("Double Wookiee", (Stat.STRENGTH,)),
    Race("Skraeling", (Stat.WISDOM,)),
    Race("Demicanine", (Stat.CONDITION,)),
    Race("Land Squid", (Stat.STRENGTH, Stat.HP_MAX)),
)

CLASSES: tuple[CharacterClass, ...] = (
    CharacterClass("Ur-Paladin", (Stat.WISDOM, Stat.CONDITION)),
    CharacterClass("Voodoo Princess", (Stat.INTELLIGENCE, Stat.CHARISMA)),
    CharacterClass("Robot Monk", (Stat.STRENGTH,)),
    CharacterClass("Mu-Fu Monk", (Stat.DEXTERITY,)),
    CharacterClass("Mage Illusioner", (Stat.INTELLIGENCE, Stat.MP_MAX)),
    CharacterClass("Shiv-Knight", (Stat.DEXTERITY,)),
    CharacterClass("Inner Mason", (Stat.CONDITION,)),
    CharacterClass("Fighter/Organist", (Stat.CHARISMA, Stat.STRENGTH)),
    CharacterClass("Puma Burgular", (Stat.DEXTERITY,)),
    CharacterClass("Runeloremaster", (Stat.WISDOM,)),
    CharacterClass("Hunter Strangler", (Stat.DEXTERITY, Stat.INTELLIGENCE)),
    CharacterClass("Battle-Felon", (Stat.STRENGTH,)),
    CharacterClass("Tickle-Mimic", (Stat.WISDOM, Stat.INTELLIGENCE)),
    CharacterClass("Slow Poisoner", (Stat.CONDITION,)),
    CharacterClass("Bastard Lunatic", (Stat.CONDITION,)),
    CharacterClass("Lowling", (Stat.WISDOM,)),
    CharacterClass("Birdrider", (Stat.WISDOM,)),
    CharacterClass("Vermineer", (Stat.INTELLIGENCE,)),
)

SPELLS: tuple[str, ...] = (
    "Slime Finger",
    "Rabbit Punch",
    "Hastiness",
    "Good Move",
    "Sadness",
    "Seasick",
    "Gyp",
    "Shoelaces",
    "Innoculate",
    "Cone of Annoyance",
    "Magnetic Orb",
    "Invisible Hands",
    "Revolting Cloud",
    "Aqueous Humor",
    "Spectral Miasma",
    "Clever Fellow",
    "Lockjaw",
    "History Lesson",
    "Hydrophobia",
    "Big Sister",
    "Cone of Paste",
    "Mulligan",
    "Nestor's Bright Idea",
    "Holy Batpole",
    "Tumor (Benign)",
    "Braingate",
    "Nonplus",
    "Animate Nightstand",
    "Eye of the Troglodyte",
    "Curse Name",
    "Dropsy",
    "Vitreous Humor",
    "Roger's Grand Illusion",
    "Covet",
    "Black Idaho",
    "Astral Miasma",
    "Spectral Oyster",
    "Acrid Hands",
    "Angioplasty",
    "Grognor's Big Day Off",
    "Tumor (Malignant)",
    "Animate Tunic",
    "Ursine Armor",
    "Holy Roller",
    "Tonsillectomy",
    "Curse Family",
    "Infinite Confusion",
)

OFFENSE_ATTRIBUTE: tuple[EquipmentPreset, ...] = (
    EquipmentPreset("Polished", 1),
    EquipmentPreset("Serrated", 1),
    EquipmentPreset("Heavy", 1),
    EquipmentPreset("Pronged", 2),
    EquipmentPreset("Steely", 2),
    EquipmentPreset("Vicious", 3),
    EquipmentPreset("Venomed", 4),
    EquipmentPreset("Stabbity", 4),
    EquipmentPreset("Dancing", 5),
    EquipmentPreset("Invisible", 6),
    EquipmentPreset("Vorpal", 7),
)

DEFENSE_ATTRIBUTE: tuple[EquipmentPreset, ...] = (
    EquipmentPreset("Studded", 1),
    EquipmentPreset("Banded", 2),
    EquipmentPreset("Gilded", 2),
    EquipmentPreset("Festooned", 3),
    EquipmentPreset("Holy", 4),
    EquipmentPreset("Cambric", 1),
    EquipmentPreset("Fine", 4),
    EquipmentPreset("Impressive", 5),
    EquipmentPreset("Custom", 3),
)

WEAPONS: tuple[EquipmentPreset, ...] = (
    EquipmentPreset("Stick", 0),
    EquipmentPreset("Broken Bottle", 1),
    EquipmentPreset("Shiv", 1),
    EquipmentPreset("Sprig", 1),
    EquipmentPreset("Oxgoad", 1),
    EquipmentPreset("Eelspear", 2),
    EquipmentPreset("Bowie Knife", 2),
    EquipmentPreset("Claw Hammer", 2),
    EquipmentPreset("Handpeen", 2),
    EquipmentPreset("Andiron", 3),
    EquipmentPreset("Hatchet", 3),
    EquipmentPreset("Tomahawk", 3),
    EquipmentPreset("Hackbarm", 3),
    EquipmentPreset("Crowbar", 4),
    EquipmentPreset("Mace", 4),
    EquipmentPreset("Battleadze", 4),
    EquipmentPreset("Leafmace", 5),
    EquipmentPreset("Shortsword", 5),
    EquipmentPreset("Longiron", 5),
    EquipmentPreset("Poachard", 5),
    EquipmentPreset("Baselard", 5),
    EquipmentPreset("Whinyard", 6),
    EquipmentPreset("Blunderbuss", 6),
    EquipmentPreset("Longsword", 6),
    EquipmentPreset("Crankbow", 6),
    EquipmentPreset("Blibo", 7),
    EquipmentPreset("Broadsword", 7),
    EquipmentPreset("Kreen", 7),
    EquipmentPreset("Warhammer", 7),
    EquipmentPreset("Morning Star", 8),
    EquipmentPreset("Pole-adze", 8),
    EquipmentPreset("Spontoon", 8),
    EquipmentPreset("Bastard Sword", 9),
    EquipmentPreset("Peen-arm", 9),
    EquipmentPreset("Culverin", 10),
    EquipmentPreset("Lance", 10),
    EquipmentPreset("Halberd", 11),
    EquipmentPreset("Poleax", 12),
    EquipmentPreset("Bandyclef", 15),
)

SHIELDS: tuple[EquipmentPreset, ...] = (
    EquipmentPreset("Parasol", 0),
    EquipmentPreset("Pie Plate", 1),
    EquipmentPreset("Garbage Can Lid", 2),
    EquipmentPreset("Buckler", 3),
    EquipmentPreset("Plexiglass", 4),
    EquipmentPreset("Fender", 4),
    EquipmentPreset("Round Shield", 5),
    EquipmentPreset("Carapace", 5),
    EquipmentPreset("Butterfly Shield", 6),
    EquipmentPreset("Retiarius Net", 6),
    EquipmentPreset("Mini Shield", 7),
    EquipmentPreset("Pavise", 8),
    EquipmentPreset("Tower Shield", 9),
    EquipmentPreset("Baroque Shield", 11),
    EquipmentPreset("Aegis", 12),
    EquipmentPreset("Magnetic Field", 18),
)

ARMORS: tuple[EquipmentPreset, ...] = (
    EquipmentPreset("Lace", 1),
    EquipmentPreset("Macrame", 2),
    EquipmentPreset("Burlap", 3),
    EquipmentPreset("Canvas", 4),
    EquipmentPreset("Flannel", 5),
    EquipmentPreset("Chamois", 6),
    EquipmentPreset("Pleathers", 7),
    EquipmentPreset("Leathers", 8),
    EquipmentPreset("Bearskin", 9),
    EquipmentPreset("Ringmail", 10),
    EquipmentPreset("Scale Mail", 12),
    EquipmentPreset("Chainmail", 14),
    EquipmentPreset("Splint Mail", 15),
    EquipmentPreset("Platemail", 16),
    EquipmentPreset("ABS", 17),
    EquipmentPreset("Kevlar", 18),
    EquipmentPreset("Titanium", 19),
    EquipmentPreset("Mithril Mail", 20),
    EquipmentPreset("Diamond Mail", 25),
    EquipmentPreset("Plasma", 30),
)

SPECIALS: tuple[str, ...] = (
    "Diadem", "Festoon", "Gemstone", "Phial", "Tiara", "Scabbard", "Arrow", "Lens",
    "Lamp", "Hymnal", "Fleece", "Laurel", "Brooch", "Gimlet", "Cobble", "Albatross",
    "Brazier", "Bandolier", "Tome", "Garnet", "Amethyst", "Candelabra", "Corset",
    "Sphere", "Sceptre", "Ankh", "Talisman", "Orb", "Gammel", "Ornament", "Brocade",
    "Galoon", "Bijou", "Spangle", "Gimcrack", "Hood", "Vulpeculum",
)

ITEM_ATTRIBUTES: tuple[str, ...] = (
    "Golden", "Gilded", "Spectral", "Astral", "Garlanded", "Precious", "Crafted",
    "Dual", "Filigreed", "Cruciate", "Arcane", "Blessed", "Reverential", "Lucky",
    "Enchanted", "Gleaming", "Grandiose", "Sacred", "Legendary", "Mythic",
    "Crystalline", "Austere", "Ostentatious", "One True", "Proverbial", "Fearsome",
    "Deadly", "Benevolent", "Unearthly", "Magnificent", "Iron", "Ormolu", "Puissant",
)

ITEM_PREPOSITION: tuple[str, ...] = (
    "Foreboding", "Foreshadowing", "Nervousness", "Happiness", "Torpor", "Danger",
    "Craftiness", "Silliness", "Invisibility", "Rapidity", "Pleasure", "Practicality",
    "Hurting", "Joy", "Petulance", "Intrusion", "Chaos", "Suffering", "Extroversion",
    "Frenzy", "Sisterhood", "Solitude", "Punctuality", "Efficiency", "Comfort",
    "Patience", "Internment", "Incontinence", "Homelessness", "Interference", "Luck",
    "Delight",
)

BORING_ITEMS: tuple[str, ...] = (
    "nail", "lunchpail", "sock", "I.O.U.", "cookie", "pint", "toothpick", "writ",
    "newspaper", "letter", "plank", "hat", "egg", "coin", "needle", "bucket",
    "ladder", "chicken", "twig", "dirtclod", "counterpane", "vest", "teratoma",
    "bunny", "rock", "pole", "carrot", "canoe", "inkwell", "hoe", "bandage",
    "trowel", "towel", "planter box", "anvil", "axle", "tuppence", "casket",
    "nosegay", "trinket", "credenza",
)

TITLES: tuple[str, ...] = ("Mr.", "Mrs.", "Sir", "Sgt.", "Ms.", "Captain", "Chief", "Admiral", "Saint")

IMPRESSIVE_TITLES: tuple[str, ...] = (
    "King", "Queen", "Lord", "Lady", "Viceroy", "Mayor", "Prince", "Princess",
    "Chief", "Boss", "Archbishop",
)

_MONSTER_ROWS: tuple[tuple[str, int, str | None], ...] = (
    ("Anhkheg", 6, "chitin"),
    ("Ant", 0, "antenna"),
    ("Ape", 4, "ass"),
    ("Baluchitherium", 14, "ear"),
    ("Beholder", 10, "eyestalk"),
    ("Black Pudding", 10, "saliva"),
    ("Blink Dog", 4, "eyelid"),
    ("Cub Scout", 1, "neckerchief"),
    ("Girl Scout", 2, "cookie"),
    ("Boy Scout", 3, "merit badge"),
    ("Eagle Scout", 4, "merit badge"),
    ("Bugbear", 3, "skin"),
    ("Bugboar", 3, "tusk"),
    ("Boogie", 3, "slime"),
    ("Camel", 2, "hump"),
    ("Carrion Crawler", 3, "egg"),
    ("Catoblepas", 6, "neck"),
    ("Centaur", 4, "rib"),
    ("Centipede", 0, "leg"),
    ("Cockatrice", 5, "wattle"),
    ("Couatl", 9, "wing"),
    ("Crayfish", 0, "antenna"),
    ("Demogorgon", 53, "tentacle"),
    ("Jubilex", 17, "gel"),
    ("Manes", 1, "tooth"),
    ("Orcus", 27, "wand"),
    ("Succubus", 6, "bra"),
    ("Vrock", 8, "neck"),
    ("Hezrou", 9, "leg"),
    ("Glabrezu", 10, "collar"),
    ("Nalfeshnee", 11, "tusk"),
    ("Marilith", 7, "arm"),
    ("Balor", 8, "whip"),
    ("Yeenoghu", 25, "flail"),
    ("Asmodeus", 52, "leathers"),
    ("Baalzebul", 43, "pants"),
    ("Barbed Devil", 8, "flame"),
    ("Bone Devil", 9, "hook"),
    ("Dispater", 30, "matches"),
    ("Erinyes", 6, "thong"),
    ("Geryon", 30, "cornucopia"),
    ("Malebranche", 5, "fork"),
    ("Ice Devil", 11, "snow"),
    ("Lemure", 3, "blob"),
    ("Pit Fiend", 13, "seed"),
    ("Anklyosaurus", 9, "tail"),
    ("Brontosaurus", 30, "brain"),
    ("Diplodocus", 24, "fin"),
    ("Elasmosaurus", 15, "neck"),
    ("Gorgosaurus", 13, "arm"),
    ("Iguanadon", 6, "thumb"),
    ("Megalosaurus", 12, "jaw"),
    ("Monoclonius", 8, "horn"),
    ("Pentasaurus", 12, "head"),
    ("Stegosaurus", 18, "plate"),
    ("Triceratops", 16, "horn"),
    ("Tyrannosaurus Rex", 18, "forearm"),
    ("Djinn", 7, "lamp"),
    ("Doppleganger", 4, "face"),
    ("Black Dragon", 7, None),
    ("Plaid Dragon", 7, "sporrin"),
    ("Blue Dragon", 9, None),
    ("Beige Dragon", 9, None),
    ("Brass Dragon", 7, "pole"),
    ("Tin Dragon", 8, None),
    ("Bronze Dragon", 9, "medal"),
    ("Chromatic Dragon", 16, "scale"),
    ("Copper Dragon", 8, "loafer"),
    ("Gold Dragon", 8, "filling"),
    ("Green Dragon", 8, None),
    ("Platinum Dragon", 21, None),
    ("Red Dragon", 10, "cocktail"),
    ("Silver Dragon", 10, None),
    ("White Dragon", 6, "tooth"),
    ("Dragon Turtle", 13, "shell"),
    ("Dryad", 2, "acorn"),
    ("Dwarf", 1, "drawers"),
    ("Eel", 2, "sashimi"),
    ("Efreet", 10, "cinder"),
    ("Sand Elemental", 8, "glass"),
    ("Bacon Elemental", 10, "bit"),
    ("Cheese Elemental", 14, "curd"),
    ("Hair Elemental", 16, "follicle"),
    ("Swamp Elf", 1, "lilypad"),
    ("Brown Elf", 1, "tusk"),
    ("Sea Elf", 1, "jerkin"),
    ("Ettin", 10, "fur"),
    ("Frog", 0, "leg"),
    ("Violet Fungi", 3, "spore"),
    ("Gargoyle", 4, "gravel"),
    ("Gelatinous Cube", 4, "jam"),
    ("Ghast", 4, "vomit"),
    ("Ghost", 10, None),
    ("Ghoul", 2, "muscle"),
    ("Humidity Giant", 12, "drops"),
    ("Beef Giant", 11, "steak"),
    ("Quartz Giant", 10, "crystal"),
    ("Porcelain Giant", 9, "fixture"),
    ("Rice Giant", 8, "grain"),
    ("Cloud Giant", 12, "condensation"),
    ("Fire Giant", 11, "cigarettes"),
    ("Frost Giant", 10, "snowman"),
    ("Hill Giant", 8, "corpse"),
    ("Stone Giant", 9, "hatchling"),
    ("Storm Giant", 15, "barometer"),
    ("Mini Giant", 4, "pompadour"),
    ("Gnoll", 2, "collar"),
    ("Gnome", 1, "hat"),
    ("Goblin", 1, "ear"),
    ("Grid Bug", 1, "carapace"),
    ("Jellyrock", 9, "seedling"),
    ("Beer Golem", 15, "foam"),
    ("Oxygen Golem", 17, "platelet"),
    ("Cardboard Golem", 14, "recycling"),
    ("Rubber Golem", 16, "ball"),
    ("Leather Golem", 15, "fob"),
    ("Gorgon", 8, "testicle"),
    ("Gray Ooze", 3, "gravy"),
    ("Green Slime", 2, "sample"),
    ("Griffon", 7, "nest"),
    ("Banshee", 7, "hair"),
    ("Harpy", 3, "mascara"),
    ("Hell Hound", 5, "tongue"),
    ("Hippocampus", 4, "mane"),
    ("Hippogriff", 3, "egg"),
    ("Hobgoblin", 1, "patella"),
    ("Homunculus", 2, "fluid"),
    ("Hydra", 8, "gyrum"),
    ("Imp", 2, "tail"),
    ("Invisible Stalker", 8, None),
    ("Iron Peasant", 3, "chaff"),
    ("Jumpskin", 3, "shin"),
    ("Kobold", 1, "tail"),
    ("Leprechaun", 1, "wallet"),
    ("Leucrotta", 6, "hoof"),
    ("Lich", 11, "crown"),
    ("Lizard Man", 2, "tail"),
    ("Lurker", 10, "sac"),
    ("Manticore", 6, "spike"),
    ("Mastodon", 12, "tusk"),
    ("Medusa", 6, "eye"),
    ("Multicell", 2, "dendrite"),
    ("Pirate", 1, "booty"),
    ("Berserker", 1, "shirt"),
    ("Caveman", 2, "club"),
    ("Dervish", 1, "robe"),
    ("Merman", 1, "trident"),
    ("Mermaid", 1, "gills"),
    ("Mimic", 9, "hinge"),
    ("Mind Flayer", 8, "tentacle"),
    ("Minotaur", 6, "map"),
    ("Yellow Mold", 1, "spore"),
    ("Morkoth", 7, "teeth"),
    ("Mummy", 6, "gauze"),
    ("Naga", 9, "rattle"),
    ("Nebbish", 1, "belly"),
    ("Neo-Otyugh", 11, "organ"),
    ("Nixie", 1, "webbing"),
    ("Nymph", 3, "hanky"),
    ("Ochre Jelly", 6, "nucleus"),
    ("Octopus", 2, "sucker"),
    ("Ogre", 5, "talon"),
    ("Ogre Mage", 5, "apparel"),
    ("Orc", 1, "snout"),
    ("Otyugh", 7, "organ"),
    ("Owlbear", 5, "feather"),
    ("Pegasus", 4, "aileron"),
    ("Peryton", 4, "antler"),
    ("Piercer", 3, "tip"),
    ("Pixie", 1, "dust"),
    ("Man-o-war", 3, "tentacle"),
    ("Purple Worm", 15, "dung"),
    ("Quasit", 3, "tail"),
    ("Rakshasa", 7, "pajamas"),
    ("Rat", 0, "tail"),
    ("Remorhaz", 11, "protrusion"),
    ("Roc", 18, "wing"),
    ("Roper", 11, "twine"),
    ("Rot Grub", 1, "eggsac"),
    ("Rust Monster", 5, "shavings"),
    ("Satyr", 5, "hoof"),
    ("Sea Hag", 3, "wart"),
    ("Silkie", 3, "fur"),
    ("Shadow", 3, "silhouette"),
    ("Shambling Mound", 10, "mulch"),
    ("Shedu", 9, "hoof"),
    ("Shrieker", 2, "stalk"),
    ("Skeleton", 1, "clavicle"),
    ("Spectre", 7, "vestige"),
    ("Sphinx", 10, "paw"),
    ("Spider", 0, "web"),
    ("Sprite", 1, "can"),
    ("Stirge", 1, "proboscis"),
    ("Stun Bear", 5, "tooth"),
    ("Stun Worm", 2, "trode"),
    ("Su-monster", 5, "tail"),
    ("Sylph", 3, "thigh"),
    ("Titan", 20, "sandal"),
    ("Trapper", 12, "shag"),
    ("Treant", 10, "acorn"),
    ("Triton", 3, "scale"),
    ("Troglodyte", 2, "tail"),
    ("Troll", 6, "hide"),
    ("Umber Hulk", 8, "claw"),
    ("Unicorn", 4, "blood"),
    ("Vampire", 8, "pancreas"),
    ("Wight", 4, "lung"),
    ("Will-o-the-Wisp", 9, "wisp"),
    ("Wraith", 5, "finger"),
    ("Wyvern", 7, "wing"),
    ("Xorn", 7, "jaw"),
    ("Yeti", 4, "fur"),
    ("Zombie", 2, "forehead"),
    ("Wasp", 0, "stinger"),
)

MONSTERS: tuple[Monster, ...] = tuple(Monster(name, level, item) for name, level, item in _MONSTER_ROWS)


def _require_rows(name: str, rows: Sequence[object]) -> None:
    if not rows:
        raise CatalogueError(f"catalogue table {name} is empty")


def validate_catalogue() -> None:
    """Check every reference table once before a session starts."""

    tables: dict[str, Sequence[object]] = {
        "RACES": RACES,
        "CLASSES": CLASSES,
        "SPELLS": SPELLS,
        "MONSTERS": MONSTERS,
        "WEAPONS": WEAPONS,
        "SHIELDS": SHIELDS,
        "ARMORS": ARMORS,
        "OFFENSE_ATTRIBUTE": OFFENSE_ATTRIBUTE,
        "DEFENSE_ATTRIBUTE": DEFENSE_ATTRIBUTE,
        "SPECIALS": SPECIALS,
        "ITEM_ATTRIBUTES": ITEM_ATTRIBUTES,
        "ITEM_PREPOSITION": ITEM_PREPOSITION,
        "BORING_ITEMS": BORING_ITEMS,
        "TITLES": TITLES,
        "IMPRESSIVE_TITLES": IMPRESSIVE_TITLES,
    }
    for name, rows in tables.items():
        _require_rows(name, rows)

    known = set(ALL_STATS)
    for entry in (*RACES, *CLASSES):
        unknown = [stat for stat in entry.attributes if stat not in known]
        if unknown:
            raise CatalogueError(f"{entry.name} references unknown stats: {unknown}")

    for monster in MONSTERS:
        if monster.level < 0:
            raise CatalogueError(f"monster {monster.name} has a negative level")
