from enum import Enum

class reaction_type(Enum):
    elementary = 1
    thd = 2
    fall = 3
    chem = 4
    def __int__(self):
        return self.value

class falloff_form(Enum):
    lind = 0
    troe = 1
    sri = 2
    def __int__(self):
        return self.value

class rate_coeff_type(Enum):
    arrhenius = 0
    landau_teller = 1
    def __int__(self):
        return self.value

class act_energy_units(Enum):
    cal_per_mole = 'CAL/MOLE'
    kcal_per_mole = 'KCAL/MOLE'
    joules_per_mole = 'JOULES/MOLE'
    kjoules_per_mole = 'KJOULES/MOLE'
    kelvins = 'KELVINS'
    evolts = 'EVOLTS'
    def __str__(self):
        return self.value

class quantity_units(Enum):
    moles = 'MOLES'
    molecules = 'MOLECULES'
    def __str__(self):
        return self.value
