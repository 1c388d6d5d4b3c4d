"""Periodic table: symbol → name, atomic number and molar mass.

Static lookup used when a composition resolves its element definitions.
Molar masses in g/mol.
"""

from alloycomp.models.element import PeriodicElement

_ELEMENTS: tuple[PeriodicElement, ...] = (
    PeriodicElement("H", "Hydrogen", 1, 1.00794),
    PeriodicElement("He", "Helium", 2, 4.002602),
    PeriodicElement("Li", "Lithium", 3, 6.941),
    PeriodicElement("Be", "Beryllium", 4, 9.012182),
    PeriodicElement("B", "Boron", 5, 10.811),
    PeriodicElement("C", "Carbon", 6, 12.0107),
    PeriodicElement("N", "Nitrogen", 7, 14.0067),
    PeriodicElement("O", "Oxygen", 8, 15.9994),
    PeriodicElement("F", "Fluorine", 9, 18.9984032),
    PeriodicElement("Ne", "Neon", 10, 20.1797),
    PeriodicElement("Na", "Sodium", 11, 22.98977),
    PeriodicElement("Mg", "Magnesium", 12, 24.305),
    PeriodicElement("Al", "Aluminum", 13, 26.981538),
    PeriodicElement("Si", "Silicon", 14, 28.0855),
    PeriodicElement("P", "Phosphorus", 15, 30.973761),
    PeriodicElement("S", "Sulfur", 16, 32.065),
    PeriodicElement("Cl", "Chlorine", 17, 35.453),
    PeriodicElement("Ar", "Argon", 18, 39.948),
    PeriodicElement("K", "Potassium", 19, 39.0983),
    PeriodicElement("Ca", "Calcium", 20, 40.078),
    PeriodicElement("Sc", "Scandium", 21, 44.95591),
    PeriodicElement("Ti", "Titanium", 22, 47.867),
    PeriodicElement("V", "Vanadium", 23, 50.9415),
    PeriodicElement("Cr", "Chromium", 24, 51.9961),
    PeriodicElement("Mn", "Manganese", 25, 54.938049),
    PeriodicElement("Fe", "Iron", 26, 55.845),
    PeriodicElement("Co", "Cobalt", 27, 58.9332),
    PeriodicElement("Ni", "Nickel", 28, 58.6934),
    PeriodicElement("Cu", "Copper", 29, 63.546),
    PeriodicElement("Zn", "Zinc", 30, 65.409),
    PeriodicElement("Ga", "Gallium", 31, 69.723),
    PeriodicElement("Ge", "Germanium", 32, 72.64),
    PeriodicElement("As", "Arsenic", 33, 74.9216),
    PeriodicElement("Se", "Selenium", 34, 78.96),
    PeriodicElement("Br", "Bromine", 35, 79.904),
    PeriodicElement("Kr", "Krypton", 36, 83.798),
    PeriodicElement("Rb", "Rubidium", 37, 85.4678),
    PeriodicElement("Sr", "Strontium", 38, 87.62),
    PeriodicElement("Y", "Yttrium", 39, 88.90585),
    PeriodicElement("Zr", "Zirconium", 40, 91.224),
    PeriodicElement("Nb", "Niobium", 41, 92.90638),
    PeriodicElement("Mo", "Molybdenum", 42, 95.94),
    PeriodicElement("Tc", "Technetium", 43, 98.0),
    PeriodicElement("Ru", "Ruthenium", 44, 101.07),
    PeriodicElement("Rh", "Rhodium", 45, 102.9055),
    PeriodicElement("Pd", "Palladium", 46, 106.42),
    PeriodicElement("Ag", "Silver", 47, 107.8682),
    PeriodicElement("Cd", "Cadmium", 48, 112.411),
    PeriodicElement("In", "Indium", 49, 114.818),
    PeriodicElement("Sn", "Tin", 50, 118.71),
    PeriodicElement("Sb", "Antimony", 51, 121.76),
    PeriodicElement("Te", "Tellurium", 52, 127.6),
    PeriodicElement("I", "Iodine", 53, 126.90447),
    PeriodicElement("Xe", "Xenon", 54, 131.293),
    PeriodicElement("Cs", "Cesium", 55, 132.90545),
    PeriodicElement("Ba", "Barium", 56, 137.327),
    PeriodicElement("La", "Lanthanum", 57, 138.9055),
    PeriodicElement("Ce", "Cerium", 58, 140.116),
    PeriodicElement("Pr", "Praseodymium", 59, 140.90765),
    PeriodicElement("Nd", "Neodymium", 60, 144.24),
    PeriodicElement("Pm", "Promethium", 61, 145.0),
    PeriodicElement("Sm", "Samarium", 62, 150.36),
    PeriodicElement("Eu", "Europium", 63, 151.964),
    PeriodicElement("Gd", "Gadolinium", 64, 157.25),
    PeriodicElement("Tb", "Terbium", 65, 158.92534),
    PeriodicElement("Dy", "Dysprosium", 66, 162.5),
    PeriodicElement("Ho", "Holmium", 67, 164.93032),
    PeriodicElement("Er", "Erbium", 68, 167.259),
    PeriodicElement("Tm", "Thulium", 69, 168.93421),
    PeriodicElement("Yb", "Ytterbium", 70, 173.04),
    PeriodicElement("Lu", "Lutetium", 71, 174.967),
    PeriodicElement("Hf", "Hafnium", 72, 178.49),
    PeriodicElement("Ta", "Tantalum", 73, 180.9479),
    PeriodicElement("W", "Tungsten", 74, 183.84),
    PeriodicElement("Re", "Rhenium", 75, 186.207),
    PeriodicElement("Os", "Osmium", 76, 190.23),
    PeriodicElement("Ir", "Iridium", 77, 192.217),
    PeriodicElement("Pt", "Platinum", 78, 195.078),
    PeriodicElement("Au", "Gold", 79, 196.96655),
    PeriodicElement("Hg", "Mercury", 80, 200.59),
    PeriodicElement("Tl", "Thallium", 81, 204.3833),
    PeriodicElement("Pb", "Lead", 82, 207.2),
    PeriodicElement("Bi", "Bismuth", 83, 208.98038),
    PeriodicElement("Po", "Polonium", 84, 209.0),
    PeriodicElement("At", "Astatine", 85, 210.0),
    PeriodicElement("Rn", "Radon", 86, 222.0),
    PeriodicElement("Fr", "Francium", 87, 223.0),
    PeriodicElement("Ra", "Radium", 88, 226.0),
    PeriodicElement("Ac", "Actinium", 89, 227.0),
    PeriodicElement("Th", "Thorium", 90, 232.0381),
    PeriodicElement("Pa", "Protactinium", 91, 231.03588),
    PeriodicElement("U", "Uranium", 92, 238.02891),
    PeriodicElement("Np", "Neptunium", 93, 237.0),
    PeriodicElement("Pu", "Plutonium", 94, 244.0),
    PeriodicElement("Am", "Americium", 95, 243.0),
    PeriodicElement("Cm", "Curium", 96, 247.0),
    PeriodicElement("Bk", "Berkelium", 97, 247.0),
    PeriodicElement("Cf", "Californium", 98, 251.0),
    PeriodicElement("Es", "Einsteinium", 99, 252.0),
    PeriodicElement("Fm", "Fermium", 100, 257.0),
    PeriodicElement("Md", "Mendelevium", 101, 258.0),
    PeriodicElement("No", "Nobelium", 102, 259.0),
    PeriodicElement("Lr", "Lawrencium", 103, 262.0),
    PeriodicElement("Rf", "Rutherfordium", 104, 261.0),
    PeriodicElement("Db", "Dubnium", 105, 262.0),
    PeriodicElement("Sg", "Seaborgium", 106, 266.0),
    PeriodicElement("Bh", "Bohrium", 107, 264.0),
    PeriodicElement("Hs", "Hassium", 108, 277.0),
    PeriodicElement("Mt", "Meitnerium", 109, 268.0),
    PeriodicElement("Ds", "Darmstadtium", 110, 281.0),
    PeriodicElement("Rg", "Roentgenium", 111, 272.0),
    PeriodicElement("Cn", "Copernicium", 112, 285.0),
    PeriodicElement("Nh", "Nihonium", 113, 286.0),
    PeriodicElement("Fl", "Flerovium", 114, 289.0),
    PeriodicElement("Mc", "Moscovium", 115, 289.0),
    PeriodicElement("Lv", "Livermorium", 116, 293.0),
    PeriodicElement("Ts", "Tennessine", 117, 294.0),
    PeriodicElement("Og", "Oganesson", 118, 294.0),
)

PERIODIC_TABLE: dict[str, PeriodicElement] = {el.symbol: el for el in _ELEMENTS}


def normalize_symbol(symbol: str) -> str:
    """Title-case a chemical symbol: ``"fe"``, ``"FE"`` → ``"Fe"``."""
    return symbol.strip().capitalize()


def get_element(symbol: str) -> PeriodicElement:
    """Return the periodic-table entry for *symbol* (case-insensitive).

    Raises:
        KeyError: If *symbol* is not a known element.
    """
    try:
        return PERIODIC_TABLE[normalize_symbol(symbol)]
    except KeyError:
        raise KeyError(f"Unknown element: {symbol!r}")


def molar_mass(symbol: str) -> float:
    """Molar mass of *symbol* [g/mol]."""
    return get_element(symbol).molar_mass
