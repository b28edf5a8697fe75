"""Module containing element dict, element, species and reaction classes.

"""

# Standard libraries
import numpy as np

# Local imports
from .reaction_types import (reaction_type, falloff_form, rate_coeff_type,
                             act_energy_units, quantity_units)

__all__ = ['get_elem_wt', 'Element', 'Constituent', 'Species',
           'RxnSpecies', 'RateCoeff', 'Reaction', 'ReactionUnits']


def _values_equal(value, other):
    if isinstance(value, np.ndarray) or isinstance(other, np.ndarray):
        return np.array_equal(value, other)
    if isinstance(value, (list, tuple)):
        if not isinstance(other, (list, tuple)) or len(value) != len(other):
            return False
        return all(_values_equal(x, y) for x, y in zip(value, other))
    if isinstance(value, dict):
        if not isinstance(other, dict) or set(value) != set(other):
            return False
        return all(_values_equal(value[k], other[k]) for k in value)
    return value == other


class CommonEqualityMixin(object):
    """Base class for the mechanism classes for equality comparison.

    Attributes named in ``_eq_skip`` (raw source text, comments) are not
    compared.
    """
    _eq_skip = ()

    def __eq__(self, other):
        if type(self) is not type(other):
            return False
        for key, value in self.__dict__.items():
            if key in self._eq_skip:
                continue
            if key not in other.__dict__:
                return False
            if not _values_equal(value, other.__dict__[key]):
                return False
        return True

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None


def get_elem_wt():
    """Returns dict with built-in element names and atomic weights [kg/kmol].

    Keys are capitalized element symbols (e.g., 'Ar'), which is how element
    names from a mechanism are looked up.

    Returns
    -------
    elem_wt : dict
        Dictionary with element name keys and atomic weight [kg/kmol] values.
    """
    elem_wt = dict([
        ('H', 1.00794), ('He', 4.00260), ('Li', 6.93900),
        ('Be', 9.01220), ('B', 10.81100), ('C', 12.0110),
        ('N', 14.00674), ('O', 15.99940), ('F', 18.99840),
        ('Ne', 20.18300), ('Na', 22.98980), ('Mg', 24.31200),
        ('Al', 26.98150), ('Si', 28.08600), ('P', 30.97380),
        ('S', 32.06400), ('Cl', 35.45300), ('Ar', 39.94800),
        ('K', 39.10200), ('Ca', 40.08000), ('Sc', 44.95600),
        ('Ti', 47.90000), ('V', 50.94200), ('Cr', 51.99600),
        ('Mn', 54.93800), ('Fe', 55.84700), ('Co', 58.93320),
        ('Ni', 58.71000), ('Cu', 63.54000), ('Zn', 65.37000),
        ('Ga', 69.72000), ('Ge', 72.59000), ('As', 74.92160),
        ('Se', 78.96000), ('Br', 79.90090), ('Kr', 83.80000),
        ('Rb', 85.47000), ('Sr', 87.62000), ('Y', 88.90500),
        ('Zr', 91.22000), ('Nb', 92.90600), ('Mo', 95.94000),
        ('Tc', 99.00000), ('Ru', 101.07000), ('Rh', 102.90500),
        ('Pd', 106.40000), ('Ag', 107.87000), ('Cd', 112.40000),
        ('In', 114.82000), ('Sn', 118.69000), ('Sb', 121.75000),
        ('Te', 127.60000), ('I', 126.90440), ('Xe', 131.30000),
        ('Cs', 132.90500), ('Ba', 137.34000), ('La', 138.91000),
        ('Ce', 140.12000), ('Pr', 140.90700), ('Nd', 144.24000),
        ('Pm', 145.00000), ('Sm', 150.35000), ('Eu', 151.96000),
        ('Gd', 157.25000), ('Tb', 158.92400), ('Dy', 162.50000),
        ('Ho', 164.93000), ('Er', 167.26000), ('Tm', 168.93400),
        ('Yb', 173.04000), ('Lu', 174.99700), ('Hf', 178.49000),
        ('Ta', 180.94800), ('W', 183.85000), ('Re', 186.20000),
        ('Os', 190.20000), ('Ir', 192.20000), ('Pt', 195.09000),
        ('Au', 196.96700), ('Hg', 200.59000), ('Tl', 204.37000),
        ('Pb', 207.19000), ('Bi', 208.98000), ('Po', 210.00000),
        ('At', 210.00000), ('Rn', 222.00000), ('Fr', 223.00000),
        ('Ra', 226.00000), ('Ac', 227.00000), ('Th', 232.03800),
        ('Pa', 231.00000), ('U', 238.03000), ('Np', 237.00000),
        ('Pu', 242.00000), ('Am', 243.00000), ('Cm', 247.00000),
        ('Bk', 249.00000), ('Cf', 251.00000), ('Es', 254.00000),
        ('Fm', 253.00000), ('D', 2.01410), ('E', 5.48578e-4)
    ])
    return elem_wt


class Element(CommonEqualityMixin):
    """Element class.

    Attributes
    ----------
    name : str
        Element symbol, as declared.
    index : int
        Position in the element table (declaration order, from 0).
    weight : float
        Atomic weight [kg/kmol].
    weight_from_db : bool
        ``True`` if ``weight`` came from the default table, ``False`` if
        given explicitly in the mechanism (``SYM/weight/``).
    valid : bool
        ``True`` if ``weight`` is positive.
    comment : str
        Comment on the line declaring the element.

    """
    _eq_skip = ('comment',)

    def __init__(self, name, index=0, weight=0.0, weight_from_db=True,
                 comment=''):
        self.name = name
        self.index = index
        self.weight = weight
        self.weight_from_db = weight_from_db
        self.valid = weight > 0.0
        self.comment = comment

    def __repr__(self):
        return 'Element({!r}, {}, {})'.format(self.name, self.index,
                                              self.weight)


class Constituent(CommonEqualityMixin):
    """An element and its number of atoms within a species.

    The number of atoms may be non-integral.
    """

    def __init__(self, name, number):
        self.name = name
        self.number = number

    def __repr__(self):
        return 'Constituent({!r}, {})'.format(self.name, self.number)


class Species(CommonEqualityMixin):
    """Species class.

    Contains all information about a single species.

    Attributes
    ----------
    name : str
        Name of species.
    index : int
        Position in the species table, in declaration order and counted
        from 0 (Chemkin numbers species from 1, so species ``k`` in
        Chemkin output has index ``k - 1``). Thermo-only records keep 0.
    phase : str
        Single-character phase descriptor from the thermo record (e.g. 'G').
    elem : list of `Constituent`
        Elemental composition, in the order given in the thermo record.
    comp : dict
        Element symbol -> number of atoms, mirrors ``elem``.
    mw : float
        Molecular weight [kg/kmol].
    hi : `numpy.ndarray`
        High-temperature range NASA thermodynamic coefficients.
    lo : `numpy.ndarray`
        Low-temperature range NASA thermodynamic coefficients.
    Trange : list of float
        Temperatures defining ranges of thermodynamic polynomial fits
        (low, middle, high).
    id : str
        Identifier string (usually a date or source) from the thermo record.
    valid : bool
        ``True`` once complete thermodynamic data has been attached.

    """

    def __init__(self, name, index=0):
        self.name = name
        self.index = index
        self.phase = ''

        # elemental composition
        self.elem = []
        self.comp = {}
        # molecular weight [kg/kmol]
        self.mw = 0.0
        # high-temp range thermodynamic coefficients
        self.hi = np.zeros(7)
        # low-temp range thermodynamic coefficients
        self.lo = np.zeros(7)
        # temperature [K] range for thermodynamic coefficients
        self.Trange = [0.0, 0.0, 0.0]

        self.id = ''
        self.valid = False

    def add_element(self, symbol, number):
        """Adds ``number`` atoms of element ``symbol``; zero counts are ignored.
        """
        if number != 0.0:
            self.elem.append(Constituent(symbol, number))
            self.comp[symbol] = number

    @property
    def tlow(self):
        return self.Trange[0]

    @property
    def tmid(self):
        return self.Trange[1]

    @property
    def thigh(self):
        return self.Trange[2]

    def set_thermo(self, other):
        """Copies thermo record data from ``other``, keeping name and index.
        """
        self.phase = other.phase
        self.elem = list(other.elem)
        self.comp = dict(other.comp)
        self.hi = np.array(other.hi, dtype=np.float64)
        self.lo = np.array(other.lo, dtype=np.float64)
        self.Trange = list(other.Trange)
        self.id = other.id
        self.valid = other.valid

    def __repr__(self):
        return 'Species({!r}, {})'.format(self.name, self.index)


class RxnSpecies(CommonEqualityMixin):
    """A reactant or product of a reaction.

    Attributes
    ----------
    name : str
        Species name.
    number : float
        Stoichiometric coefficient.
    groups : list of list of int
        Group-additivity breakdown from a metadata line; each group holds
        the number of atoms of every element (in element table order).

    """

    def __init__(self, name, number=1.0):
        self.name = name
        self.number = number
        self.groups = []

    def __repr__(self):
        return 'RxnSpecies({!r}, {})'.format(self.name, self.number)


class RateCoeff(CommonEqualityMixin):
    """Arrhenius rate coefficient, k = A * T^n * exp(-E/RT).

    For the Landau-Teller form, ``B`` and ``C`` add the terms
    exp(B / T^(1/3) + C / T^(2/3)).
    """

    def __init__(self, A=0.0, n=0.0, E=0.0):
        self.A = A
        self.n = n
        self.E = E
        self.B = 0.0
        self.C = 0.0
        self.type = rate_coeff_type.arrhenius

    def __repr__(self):
        return 'RateCoeff({}, {}, {})'.format(self.A, self.n, self.E)


class Reaction(CommonEqualityMixin):
    """Reaction class.

    Contains all information about a single reaction.

    Attributes
    ----------
    number : int
        Reaction number, in order of appearance (from 1).
    reac : list of `RxnSpecies`
        Reactants.
    prod : list of `RxnSpecies`
        Products.
    rev : bool
        True if reversible reaction, False if irreversible.
    type : `reaction_type`
        One of elementary, third-body, falloff or chemically activated.
    is_falloff : bool
        True if the equation carries a '(+M)' or '(+species)' marker.
    is_thd : bool
        True if the equation carries a '+M' marker.
    kf : `RateCoeff`
        Forward rate coefficient.
    krev : `RateCoeff`, optional
        Explicit reverse rate coefficient (REV and/or RLT given).
    kf_aux : `RateCoeff`, optional
        Low-pressure (falloff) or high-pressure (chemically activated)
        limit rate coefficient.
    falloff_type : `falloff_form`
        Blending function; `falloff_form.lind` if neither TROE nor SRI given.
    falloff_par : list of float
        TROE or SRI parameters.
    thd_body : str
        Name of the specific third-body species, 'M' for the mixture,
        or ``None`` if the reaction has no third body.
    thd_body_eff : dict
        Species name -> enhanced third-body efficiency.
    dup : bool
        Duplicate reaction flag.
    other_aux : dict
        Unrecognized auxiliary keyword -> list of float data.
    lines : list of str
        Source lines the reaction was built from (with comments).
    comment : list of str
        Comments read since the previous reaction.

    Notes
    -----
    `rev` does not require `krev`; if no explicit coefficients, the
    reverse reaction rate is to be calculated through the equilibrium
    constant.

    """
    _eq_skip = ('lines', 'comment')

    def __init__(self, number=0):
        self.number = number

        self.reac = []
        self.prod = []
        self.rev = True

        self.type = reaction_type.elementary
        self.is_falloff = False
        self.is_thd = False

        # Arrhenius coefficients
        self.kf = RateCoeff()
        self.krev = None
        self.kf_aux = None

        # pressure dependence
        self.falloff_type = falloff_form.lind
        self.falloff_par = []

        # third-body
        self.thd_body = None
        self.thd_body_eff = {}

        self.dup = False
        self.other_aux = {}

        self.lines = []
        self.comment = []

    def __repr__(self):
        return 'Reaction({}, {!r})'.format(self.number, self.equation())

    def equation(self):
        """Returns the reaction equation, without markers or coefficients.
        """
        def side(species):
            return ' + '.join(
                sp.name if sp.number == 1.0 else '{:g} {}'.format(sp.number,
                                                                  sp.name)
                for sp in species)
        arrow = ' <=> ' if self.rev else ' => '
        return side(self.reac) + arrow + side(self.prod)


class ReactionUnits(CommonEqualityMixin):
    """Units declared on the REACTIONS line.

    Attributes
    ----------
    act_energy : `act_energy_units`
        Units of activation energies (default cal/mole).
    quantity : `quantity_units`
        Units of quantity in pre-exponential factors (default moles).

    """

    def __init__(self, act_energy=act_energy_units.cal_per_mole,
                 quantity=quantity_units.moles):
        self.act_energy = act_energy
        self.quantity = quantity

    def __repr__(self):
        return 'ReactionUnits({}, {})'.format(self.act_energy, self.quantity)
