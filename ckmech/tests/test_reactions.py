#system
import logging
import unittest

#modules
import pytest

#local imports
from ..core.line_reader import CKSyntaxError
from ..core.chem_utilities import RxnSpecies, ReactionUnits
from ..core.reaction_types import (reaction_type, falloff_form,
                                   rate_coeff_type, act_energy_units,
                                   quantity_units)
from . import TestClass, get_parser, read_reactions, header

log = logging.getLogger('ckmech.tests.reactions')


def rxn_from(text, units=''):
    elems, specs, reacs, units = read_reactions(text, units)
    return reacs


class SubTest(TestClass):
    def test_mechanism(self):
        reacs = self.store.reacs
        assert len(reacs) == 9
        assert [r.number for r in reacs] == list(range(1, 10))
        assert self.store.units == ReactionUnits(act_energy_units.cal_per_mole,
                                                 quantity_units.moles)

    def test_elementary(self):
        rxn = self.store.reacs[0]
        assert rxn.reac == [RxnSpecies('H'), RxnSpecies('O2')]
        assert rxn.prod == [RxnSpecies('O'), RxnSpecies('OH')]
        assert rxn.rev
        assert rxn.type == reaction_type.elementary
        assert rxn.kf.A == 2.65e16
        assert rxn.kf.n == -0.6707
        assert rxn.kf.E == 17041.0
        assert rxn.kf.type == rate_coeff_type.arrhenius
        assert rxn.thd_body is None
        assert rxn.comment == [' hydrogen oxidation']
        assert rxn.equation() == 'H + O2 <=> O + OH'

    def test_third_body(self):
        rxn = self.store.reacs[2]
        assert rxn.reac == [RxnSpecies('O', 2.0)]
        assert rxn.prod == [RxnSpecies('O2')]
        assert rxn.is_thd and not rxn.is_falloff
        assert rxn.type == reaction_type.thd
        assert rxn.thd_body == 'M'
        assert rxn.thd_body_eff == {'H2': 2.4, 'H2O': 15.4, 'AR': 0.83}
        assert len(rxn.lines) == 2

        rxn = self.store.reacs[8]
        assert [sp.name for sp in rxn.reac] == ['H', 'OH']
        assert rxn.is_thd

    def test_falloff(self):
        rxn = self.store.reacs[3]
        assert rxn.is_falloff
        assert rxn.type == reaction_type.fall
        assert rxn.thd_body == 'M'
        assert rxn.reac == [RxnSpecies('H'), RxnSpecies('O2')]
        assert rxn.prod == [RxnSpecies('HO2')]
        assert rxn.kf.A == 4.65e12
        assert (rxn.kf_aux.A, rxn.kf_aux.n, rxn.kf_aux.E) == (5.75e19, -1.4,
                                                              0.0)
        assert rxn.falloff_type == falloff_form.troe
        assert rxn.falloff_par == [0.5, 1.0e-30, 1.0e30]
        assert rxn.thd_body_eff['O2'] == 0.78

        rxn = self.store.reacs[4]
        assert rxn.prod == [RxnSpecies('OH', 2.0)]
        assert rxn.falloff_par == [0.42, 1.0e-30, 1.0e30, 1.0e10]
        assert rxn.comment == [' hydrogen peroxide']

    def test_irreversible_and_duplicate(self):
        reacs = self.store.reacs
        assert not reacs[5].rev
        assert reacs[6].dup and reacs[7].dup
        assert not reacs[5].dup
        assert reacs[6].kf.E == -1630.0
        assert reacs[6] != reacs[7]


def test_units():
    for units, act, quant in [
            ('', act_energy_units.cal_per_mole, quantity_units.moles),
            ('KCAL/MOLE MOLECULES', act_energy_units.kcal_per_mole,
             quantity_units.molecules),
            ('kelvins', act_energy_units.kelvins, quantity_units.moles),
            ('MOLES KJOULES/MOLE', act_energy_units.kjoules_per_mole,
             quantity_units.moles),
            ('JOULES/MOLE', act_energy_units.joules_per_mole,
             quantity_units.moles),
            ('EVOLTS', act_energy_units.evolts, quantity_units.moles)]:
        elems, specs, reacs, parsed = read_reactions('H+O2=O+OH 1 0 0',
                                                     units)
        assert parsed.act_energy == act
        assert parsed.quantity == quant


def test_arrows():
    reacs = rxn_from('H+O2=O+OH 1 0 0\nH+O2<=>O+OH 1 0 0\nH+O2=>O+OH 1 0 0\n'
                     'H + O2 = O + OH 1 0 0')
    assert [r.rev for r in reacs] == [True, True, False, True]
    assert all(r.reac == reacs[0].reac for r in reacs)
    assert all(r.prod == reacs[0].prod for r in reacs)


def test_coefficients():
    rxn = rxn_from('2H2+O2=>2H2O 1 0 0\n0.5O2+H2=>H2O 1 0 0')
    assert rxn[0].reac == [RxnSpecies('H2', 2.0), RxnSpecies('O2')]
    assert rxn[0].prod == [RxnSpecies('H2O', 2.0)]
    assert rxn[1].reac == [RxnSpecies('O2', 0.5), RxnSpecies('H2')]


def test_arrhenius_formats():
    rxn = rxn_from('H+O2=O+OH 1.0d10 -1.5 1.2E+3')[0]
    assert (rxn.kf.A, rxn.kf.n, rxn.kf.E) == (1.0e10, -1.5, 1200.0)


def test_missing_arrhenius():
    with pytest.raises(CKSyntaxError) as e:
        rxn_from('H+O2=O+OH')
    assert 'expected 3 Arrhenius parameters' in str(e.value)

    with pytest.raises(CKSyntaxError) as e:
        rxn_from('H+O2=O+OH 1 0')
    assert 'illegal number' in str(e.value)


def test_undeclared_species():
    with pytest.raises(CKSyntaxError) as e:
        rxn_from('H+XX=O+OH 1 0 0')
    assert 'undeclared reactant species XX in reaction 1' in str(e.value)
    assert e.value.line == 8

    with pytest.raises(CKSyntaxError) as e:
        rxn_from('H+O2=O+OH 1 0 0\nH+O2=O+YY 1 0 0')
    assert 'undeclared product species YY in reaction 2' in str(e.value)
    assert e.value.line == 9


def test_markers():
    rxn = rxn_from('H+O2(+AR)=HO2(+AR) 1 0 0\nLOW/1 0 0/')[0]
    assert rxn.thd_body == 'AR'
    assert rxn.is_falloff
    assert rxn.prod == [RxnSpecies('HO2')]

    # only the right side carries the marker
    rxn = rxn_from('H+O2=HO2(+M) 1 0 0')[0]
    assert rxn.is_falloff
    assert rxn.type == reaction_type.fall
    assert rxn.thd_body == 'M'

    rxn = rxn_from('H+O2(+m)=HO2(+m) 1 0 0')[0]
    assert rxn.thd_body == 'M'

    # '+M' counts only at the end of a side
    rxn = rxn_from('H+OH+m=H2O+M 1 0 0')[0]
    assert rxn.is_thd
    assert [sp.name for sp in rxn.reac] == ['H', 'OH']

    for bad, msg in [('H+O2(+M)=HO2+M 1 0 0', 'mismatched +M or (+M)'),
                     ('H+O2+M=HO2(+M) 1 0 0', 'mismatched +M or (+M)'),
                     ('H+O2(+AR)=HO2(+N2) 1 0 0', 'mismatched third body'),
                     ('H+O2(+M=HO2(+M) 1 0 0', 'missing )')]:
        with pytest.raises(CKSyntaxError) as e:
            rxn_from(bad)
        assert msg in str(e.value)


def test_ion_species():
    head = ('ELEMENTS\nH O E\nEND\nSPECIES\nH3O+ E H2O H\nEND\n')
    elems, specs, reacs, units = read_reactions('H3O++E=H2O+H 1 0 0\n'
                                                'H2O+H=>E+H3O+ 1 0 0',
                                                head=head)
    assert [sp.name for sp in reacs[0].reac] == ['H3O+', 'E']
    assert [sp.name for sp in reacs[1].prod] == ['E', 'H3O+']


def test_aux_data():
    rxn = rxn_from('H+O2(+M)=HO2(+M) 1 0 0\n'
                   'low/1.0e20 -1.0 100.0/ sri/0.5 1.0 2.0/\n'
                   'DUP')[0]
    assert rxn.kf_aux.A == 1.0e20
    assert rxn.falloff_type == falloff_form.sri
    assert rxn.falloff_par == [0.5, 1.0, 2.0]
    assert rxn.dup

    rxn = rxn_from('H+O2(+M)=HO2(+M) 1 0 0\nHIGH/1 2 3/\nDUPLICATE')[0]
    assert rxn.type == reaction_type.chem
    assert (rxn.kf_aux.A, rxn.kf_aux.n, rxn.kf_aux.E) == (1.0, 2.0, 3.0)
    assert rxn.dup


def test_keywords_before_data():
    rxn = rxn_from('H+O2(+M)=HO2(+M) 1 0 0\nDUP LOW/1 2 3/')[0]
    assert rxn.dup
    assert rxn.kf_aux.E == 3.0


def test_reverse_rates():
    rxn = rxn_from('H+O2=O+OH 1 0 0\nREV/5.0 0.5 10.0/')[0]
    assert (rxn.krev.A, rxn.krev.n, rxn.krev.E) == (5.0, 0.5, 10.0)

    with pytest.raises(CKSyntaxError) as e:
        rxn_from('H+O2=>O+OH 1 0 0\nREV/5.0 0.5 10.0/')
    assert 'reversible' in str(e.value)


def test_landau_teller():
    rxn = rxn_from('H+O2=O+OH 1 0 0\nLT/1.0 2.0/\nRLT/3.0 4.0/\n'
                   'REV/5.0 0.0 0.0/')[0]
    assert rxn.kf.type == rate_coeff_type.landau_teller
    assert (rxn.kf.B, rxn.kf.C) == (1.0, 2.0)
    assert rxn.krev.type == rate_coeff_type.landau_teller
    assert (rxn.krev.A, rxn.krev.B, rxn.krev.C) == (5.0, 3.0, 4.0)

    with pytest.raises(CKSyntaxError) as e:
        rxn_from('H+O2=O+OH 1 0 0\nLT/1.0 2.0 3.0/')
    assert 'expected 2 Landau-Teller parameters' in str(e.value)


def test_aux_errors():
    for text, msg in [
            ('H+O2(+M)=HO2(+M) 1 0 0\nLOW/1 2/',
             'expected 3 low-pressure Arrhenius parameters'),
            ('H+O2(+M)=HO2(+M) 1 0 0\nLOW/1 2 3/\nLOW/1 2 3/',
             'duplicate auxiliary data keyword LOW'),
            ('H+O2(+M)=HO2(+M) 1 0 0\nTROE/1 2 3/ SRI/1 2 3/',
             'cannot specify both SRI and TROE'),
            ('H+O2(+M)=HO2(+M) 1 0 0\nLOW\n',
             'LOW keyword must be followed by slash-delimited data'),
            ('H+O2(+M)=HO2(+M) 1 0 0\nLOW/1 2 x/',
             'illegal number in LOW data'),
            ('H+O2(+M)=HO2(+M) 1 0 0\nLOW/1 2 3',
             'missing /'),
            ('H+O2+M=HO2+M 1 0 0\nH2/2.0 3.0/',
             'expected a single third-body efficiency'),
            ('H+O2+M=HO2+M 1 0 0\n/2.0/',
             'missing keyword'),
            ]:
        with pytest.raises(CKSyntaxError) as e:
            rxn_from(text)
        assert msg in str(e.value)
        assert e.value.line > 8


def test_duplicate_keyword_per_reaction():
    # the same keyword may appear once for each reaction
    reacs = rxn_from('H+O2(+M)=HO2(+M) 1 0 0\nLOW/1 2 3/\n'
                     'H+OH(+M)=H2O(+M) 1 0 0\nLOW/4 5 6/')
    assert reacs[0].kf_aux.A == 1.0
    assert reacs[1].kf_aux.A == 4.0


def test_other_aux():
    rxn = rxn_from('H+O2=O+OH 1 0 0\nXSMI/0.5 0.25/ UNITS')[0]
    assert rxn.other_aux == {'XSMI': [0.5, 0.25], 'UNITS': []}


def test_end_in_aux_line():
    reacs = rxn_from('H+O2=O+OH 1 0 0\nDUP END\nH+O2=O+OH 2 0 0')
    assert len(reacs) == 1
    assert reacs[0].dup


class LogTest(unittest.TestCase):
    def test_efficiency_errors(self):
        for text in ['H+O2=O+OH 1 0 0\nH2/2.0/',
                     'H+O2(+AR)=HO2(+AR) 1 0 0\nH2/2.0/']:
            parser = get_parser(header + 'REACTIONS\n' + text + '\nEND\n',
                                log=log)
            parser.read_element_section()
            specs = parser.read_species_section()
            with self.assertLogs(log, level='ERROR'):
                with pytest.raises(CKSyntaxError) as e:
                    parser.read_reaction_section([s.name for s in specs])
            assert 'third-body efficiency error' in str(e.value)

        # efficiency of the named third body itself
        rxn = rxn_from('H+O2(+AR)=HO2(+AR) 1 0 0\nAR/0.7/')[0]
        assert rxn.thd_body_eff == {'AR': 0.7}

    def test_negative_prefactor(self):
        parser = get_parser(header + 'REACTIONS\nH+O2=O+OH -1.0 0 0\nEND\n',
                            log=log)
        parser.read_element_section()
        specs = parser.read_species_section()
        with self.assertLogs(log, level='WARNING') as cm:
            reacs, units = parser.read_reaction_section(
                [s.name for s in specs])
        assert reacs[0].kf.A == -1.0
        assert any('negative prefactor' in msg for msg in cm.output)

    def test_aux_before_reaction(self):
        parser = get_parser(header + 'REACTIONS\nDUP\nH+O2=O+OH 1 0 0\n'
                            'END\n', log=log)
        parser.read_element_section()
        specs = parser.read_species_section()
        with self.assertLogs(log, level='WARNING'):
            reacs, units = parser.read_reaction_section(
                [s.name for s in specs])
        assert len(reacs) == 1
        assert not reacs[0].dup

    def test_no_reactions(self):
        for text in [header, header + 'REACTIONS\n\n! none\nEND\n']:
            parser = get_parser(text, log=log)
            parser.read_element_section()
            specs = parser.read_species_section()
            with self.assertLogs(log, level='WARNING'):
                reacs, units = parser.read_reaction_section(
                    [s.name for s in specs])
            assert reacs == []
            assert units == ReactionUnits()

    def test_comments_and_lines(self):
        parser = get_parser(header + 'REACTIONS\n! first\n\n'
                            'H+O2=O+OH 1 0 0 ! the reaction\n! second\n'
                            'DUP\n! third\nH+O2=O+OH 2 0 0\nDUP\nEND\n')
        parser.read_element_section()
        specs = parser.read_species_section()
        reacs, units = parser.read_reaction_section([s.name for s in specs])
        assert reacs[0].comment == [' first', ' the reaction']
        assert reacs[0].lines == ['H+O2=O+OH 1 0 0 ! the reaction', 'DUP']
        assert reacs[1].comment == [' second', ' third']
