"""Scenario tests for arrow refinement, reaction detection and text groups.

Each drawing exercises one step of the interpreter; steps that need
reactions get them set up by hand so the scene stays small.
"""

# Third Party
import pytest

# Local
import cdxml_drawing
import conftest


conftest.add_chemscan_to_sys_path()

# local repo modules
import chemscan
from chemscan.chem_draw import CdxmlDocument
from chemscan.chem_draw.session import TEMP_ID_START
from chemscan.interpreter import Scheme
from chemscan.interpreter.elements import Reaction
from chemscan.interpreter.post_process.label_by_molecule import replace_label_by_molecule
from chemscan.interpreter.post_process.text_as_molecule import refine_text_as_molecule
from chemscan.interpreter.post_process.text_label import refine_text_label
from chemscan.interpreter.pre_process import pre_process
from chemscan.interpreter.reaction_detection.assign_to_reaction import resolve_reagent_conflicts
from chemscan.interpreter.reaction_detection.duplicate_reagents import refine_duplicate_reagents
from chemscan.interpreter.reaction_detection.molecule_group import assign_molecule_group
from chemscan.interpreter.reaction_detection.multi_line_chain import multi_line_chain
from chemscan.interpreter.reaction_detection.remove_separated import remove_separated_mol
from chemscan.interpreter.text_group.alias_info import (
	GENERATE_N_ATOM,
	AliasInfo,
	retrieve_alias_info,
)
from chemscan.interpreter.text_group.n_atoms import retrieve_n_atoms
from chemscan.interpreter.text_group.reaction_text_group import ReactionTextGroup
from chemscan.lookup import LookupService


#============================================
def preprocessed(drawing, lookup=None):
	document = CdxmlDocument().read(drawing.cdxml())
	return pre_process(Scheme(document, lookup).state)


#============================================
def working(drawing, lookup=None):
	return preprocessed(drawing, lookup).thaw()


#============================================
def add_reaction(work, arrow_id, reactants=(), reagents=(), products=()):
	reaction = Reaction(arrow_id)
	reaction.reactant_ids.extend(reactants)
	reaction.reagent_ids.extend(reagents)
	reaction.product_ids.extend(products)
	work.reactions.append(reaction)
	return reaction


#============================================
def flat_points(arrow):
	return [value for point in arrow.points for value in point.as_tuple()]


#============================================
def ethanol(drawing, x, y):
	fragment_id, _ = drawing.fragment(cdxml_drawing.ethanol_atoms(x, y), cdxml_drawing.CHAIN_BONDS)
	return fragment_id


# ============================================
# arrow refinement
# ============================================

#============================================
def test_second_arrow_at_the_head_bends_the_arrow():
	drawing = cdxml_drawing.Drawing()
	first_id = drawing.arrow((0.0, 0.0), (4.0, 0.0))
	second_id = drawing.arrow((4.0, 0.0), (4.0, -3.0))
	state = preprocessed(drawing)
	arrow = state.arrow_map[first_id]
	assert flat_points(arrow) == pytest.approx([0.0, 0.0, 4.0, 0.0, 4.0, -3.0], abs=1e-4)
	assert second_id in state.arrow_map
	assert not state.arrow_map[second_id].middle_points


#============================================
def test_line_through_the_middle_crosses_the_arrow_out():
	drawing = cdxml_drawing.Drawing()
	arrow_id = drawing.arrow((0.0, 0.0), (6.0, 0.0))
	drawing.line((3.0, 1.0), (3.0, -1.0))
	state = preprocessed(drawing)
	arrow = state.arrow_map[arrow_id]
	assert arrow.cross
	assert len(arrow.cross_lines) == 1
	assert dict(state.segment_map) == {}


#============================================
def test_line_touching_the_tail_extends_it():
	drawing = cdxml_drawing.Drawing()
	arrow_id = drawing.arrow((4.0, 0.0), (8.0, 0.0))
	drawing.line((2.0, 2.0), (4.0, 0.1))
	state = preprocessed(drawing)
	arrow = state.arrow_map[arrow_id]
	assert not arrow.cross
	assert flat_points(arrow) == pytest.approx([2.0, 2.0, 4.0, 0.0, 8.0, 0.0], abs=1e-4)
	assert dict(state.segment_map) == {}


#============================================
def test_line_ending_on_the_shaft_is_a_branch_not_a_cross():
	drawing = cdxml_drawing.Drawing()
	arrow_id = drawing.arrow((0.0, 0.0), (6.0, 0.0))
	drawing.line((3.0, 0.1), (3.0, -3.0))
	state = preprocessed(drawing)
	arrow = state.arrow_map[arrow_id]
	assert not arrow.cross
	assert flat_points(arrow) == pytest.approx([3.0, -3.0, 3.0, 0.0, 6.0, 0.0], abs=1e-4)
	assert dict(state.segment_map) == {}


#============================================
def test_one_split_line_extends_every_arrow_it_joins():
	drawing = cdxml_drawing.Drawing()
	lower_id = drawing.arrow((0.0, 0.0), (6.0, 0.0))
	upper_id = drawing.arrow((0.0, 3.0), (6.0, 3.0))
	drawing.line((2.0, 0.0), (2.0, 3.0))
	state = preprocessed(drawing)
	lower = state.arrow_map[lower_id]
	upper = state.arrow_map[upper_id]
	assert flat_points(lower) == pytest.approx([2.0, 3.0, 2.0, 0.0, 6.0, 0.0], abs=1e-4)
	assert flat_points(upper) == pytest.approx([2.0, 0.0, 2.0, 3.0, 6.0, 3.0], abs=1e-4)
	assert dict(state.segment_map) == {}


#============================================
def test_straight_chain_fragment_is_read_as_a_line():
	drawing = cdxml_drawing.Drawing()
	fragment_id, _ = drawing.fragment(
		[(0.0, 0.0, {}), (1.0, 0.0, {}), (2.0, 0.0, {})],
		cdxml_drawing.CHAIN_BONDS,
	)
	arrow_id = drawing.arrow((2.1, 0.0), (6.0, 0.0))
	state = preprocessed(drawing)
	assert state.fragment_as_line == 1
	assert fragment_id not in state.fragment_map
	assert fragment_id not in state.mol_map
	arrow = state.arrow_map[arrow_id]
	assert flat_points(arrow) == pytest.approx([0.0, 0.0, 2.1, 0.0, 6.0, 0.0], abs=1e-4)


#============================================
def test_arrow_without_length_is_not_an_arrow():
	drawing = cdxml_drawing.Drawing()
	drawing.arrow((2.0, 2.0), (2.0, 2.0))
	drawing.line((5.0, 5.0), (5.0, 5.0))
	state = preprocessed(drawing)
	assert dict(state.arrow_map) == {}
	assert dict(state.segment_map) == {}
	assert chemscan.parse(drawing.cdxml()).reactions == []


#============================================
def test_every_arrow_keeps_tail_and_head_apart():
	drawing = cdxml_drawing.Drawing()
	drawing.arrow((0.0, 0.0), (4.0, 0.0))
	drawing.arrow((4.0, 0.0), (4.0, -3.0))
	drawing.arrow((0.0, 5.0), (6.0, 5.0))
	drawing.line((3.0, 6.0), (3.0, 4.0))
	state = preprocessed(drawing)
	assert len(state.arrow_map) == 3
	for arrow in state.arrow_map.values():
		assert arrow.tail != arrow.head


# ============================================
# ions
# ============================================

#============================================
def ion_drawing(gap):
	drawing = cdxml_drawing.Drawing()
	sodium_id, _ = drawing.fragment([(0.0, 0.0, {"Element": "11", "Charge": "1"})])
	chloride_id, _ = drawing.fragment([(gap, 0.0, {"Element": "17", "Charge": "-1"})])
	return (drawing, sodium_id, chloride_id)


#============================================
def test_near_counter_ions_merge_into_one_salt():
	drawing, sodium_id, chloride_id = ion_drawing(2.0)
	state = preprocessed(drawing)
	assert list(state.mol_map) == [sodium_id]
	salt = state.mol_map[sodium_id]
	assert sorted(salt.cano_smiles.split(".")) == ["[Cl-]", "[Na+]"]
	assert chloride_id not in state.mol_map


#============================================
def test_distant_counter_ions_stay_apart():
	drawing, sodium_id, chloride_id = ion_drawing(6.0)
	state = preprocessed(drawing)
	assert sorted(state.mol_map) == sorted([sodium_id, chloride_id])
	assert state.mol_map[sodium_id].cano_smiles == "[Na+]"


# ============================================
# reaction detection steps
# ============================================

#============================================
def two_rows_drawing(molecule_y):
	drawing = cdxml_drawing.Drawing()
	lower_id = drawing.arrow((0.0, 0.0), (5.0, 0.0))
	upper_id = drawing.arrow((0.0, 5.0), (5.0, 5.0))
	mol_id = ethanol(drawing, 1.5, molecule_y)
	return (drawing, lower_id, upper_id, mol_id)


#============================================
def test_reagent_close_to_its_arrow_leaves_the_other_reaction():
	drawing, lower_id, upper_id, mol_id = two_rows_drawing(1.0)
	work = working(drawing)
	lower = add_reaction(work, lower_id, reagents=[mol_id])
	upper = add_reaction(work, upper_id, products=[mol_id])
	resolve_reagent_conflicts(work)
	assert lower.reagent_ids == [mol_id]
	assert upper.product_ids == []


#============================================
def test_reagent_far_from_its_arrow_stays_with_the_other_reaction():
	drawing, lower_id, upper_id, mol_id = two_rows_drawing(4.0)
	work = working(drawing)
	lower = add_reaction(work, lower_id, reagents=[mol_id])
	upper = add_reaction(work, upper_id, products=[mol_id])
	resolve_reagent_conflicts(work)
	assert lower.reagent_ids == []
	assert upper.product_ids == [mol_id]


#============================================
def test_shared_reagent_stays_with_the_nearer_arrow():
	drawing = cdxml_drawing.Drawing()
	lower_id = drawing.arrow((0.0, 0.0), (6.0, 0.0))
	upper_id = drawing.arrow((0.0, 3.0), (6.0, 3.0))
	mol_id = ethanol(drawing, 2.0, 0.8)
	work = working(drawing)
	lower = add_reaction(work, lower_id, reagents=[mol_id])
	upper = add_reaction(work, upper_id, reagents=[mol_id])
	refine_duplicate_reagents(work)
	assert lower.reagent_ids == [mol_id]
	assert upper.reagent_ids == []


#============================================
def test_reagent_used_as_reactant_elsewhere_is_dropped():
	drawing = cdxml_drawing.Drawing()
	lower_id = drawing.arrow((0.0, 0.0), (6.0, 0.0))
	upper_id = drawing.arrow((0.0, 3.0), (6.0, 3.0))
	mol_id = ethanol(drawing, 2.0, 0.8)
	work = working(drawing)
	lower = add_reaction(work, lower_id, reagents=[mol_id])
	upper = add_reaction(work, upper_id, reactants=[mol_id])
	refine_duplicate_reagents(work)
	assert lower.reagent_ids == []
	assert upper.reactant_ids == [mol_id]


#============================================
def separated_drawing(crossing_head):
	"""Two products on one head line, the far one also below a second arrow."""
	drawing = cdxml_drawing.Drawing()
	arrow_id = drawing.arrow((0.0, 0.0), (4.0, 0.0))
	near_id = ethanol(drawing, 5.0, 0.0)
	far_id = ethanol(drawing, 15.0, 0.0)
	if crossing_head:
		other_id = drawing.arrow((16.0, 10.0), (16.0, 3.0))
	else:
		other_id = drawing.arrow((10.0, 3.0), (14.0, 3.0))
	return (drawing, arrow_id, other_id, near_id, far_id)


#============================================
def test_far_product_used_by_a_crossing_arrow_is_removed():
	drawing, arrow_id, other_id, near_id, far_id = separated_drawing(True)
	work = working(drawing)
	reaction = add_reaction(work, arrow_id, products=[near_id, far_id])
	other = add_reaction(work, other_id, products=[far_id])
	remove_separated_mol(work)
	assert reaction.product_ids == [near_id]
	assert other.product_ids == [far_id]


#============================================
def test_far_product_shared_with_a_parallel_arrow_is_kept():
	drawing, arrow_id, other_id, near_id, far_id = separated_drawing(False)
	work = working(drawing)
	reaction = add_reaction(work, arrow_id, products=[near_id, far_id])
	add_reaction(work, other_id, products=[far_id])
	remove_separated_mol(work)
	assert reaction.product_ids == [near_id, far_id]


#============================================
def rows_drawing():
	"""Two rows of one horizontal arrow each, a molecule at every end."""
	drawing = cdxml_drawing.Drawing()
	upper_id = drawing.arrow((4.0, 0.0), (9.0, 0.0))
	lower_id = drawing.arrow((4.0, -6.0), (9.0, -6.0))
	molecules = {
		"upper_start": ethanol(drawing, 0.0, 0.0),
		"upper_end": ethanol(drawing, 11.0, 0.0),
		"lower_start": ethanol(drawing, 0.0, -6.0),
		"lower_end": ethanol(drawing, 11.0, -6.0),
	}
	return (drawing, upper_id, lower_id, molecules)


#============================================
def test_row_without_products_continues_on_the_next_row():
	drawing, upper_id, lower_id, molecules = rows_drawing()
	work = working(drawing)
	upper = add_reaction(work, upper_id, reactants=[molecules["upper_start"]])
	add_reaction(
		work, lower_id,
		reactants=[molecules["lower_start"]], products=[molecules["lower_end"]])
	multi_line_chain(work)
	assert upper.product_ids == [molecules["lower_start"]]


#============================================
def test_row_without_reactants_continues_from_the_row_above():
	drawing, upper_id, lower_id, molecules = rows_drawing()
	work = working(drawing)
	add_reaction(
		work, upper_id,
		reactants=[molecules["upper_start"]], products=[molecules["upper_end"]])
	lower = add_reaction(work, lower_id, products=[molecules["lower_end"]])
	multi_line_chain(work)
	assert lower.reactant_ids == [molecules["upper_end"]]


#============================================
def test_single_arrow_is_not_chained():
	drawing = cdxml_drawing.Drawing()
	arrow_id = drawing.arrow((4.0, 0.0), (9.0, 0.0))
	mol_id = ethanol(drawing, 0.0, 0.0)
	work = working(drawing)
	reaction = add_reaction(work, arrow_id, reactants=[mol_id])
	multi_line_chain(work)
	assert reaction.product_ids == []


#============================================
def test_labelled_structure_after_the_head_becomes_a_product():
	drawing = cdxml_drawing.Drawing()
	arrow_id = drawing.arrow((0.0, 0.0), (5.0, 0.0))
	title_id, structure_id = drawing.labelled_fragment(
		"MeOH",
		[(7.0, -1.5, {}), (8.0, -1.5, {"Element": "8"})],
		((0, 1),),
		(7.0, -0.5, 9.0, 0.5),
	)
	work = working(drawing)
	assert title_id in work.mol_group_map
	reaction = add_reaction(work, arrow_id)
	assign_molecule_group(work)
	assert reaction.product_ids == [structure_id]
	assert title_id not in work.text_map
	assert work.mol_group_map[title_id].molecules[0].text == "MeOH"


# ============================================
# labels and texts standing for molecules
# ============================================

#============================================
def labelled_reaction_drawing():
	drawing = cdxml_drawing.Drawing()
	start_id = ethanol(drawing, 0.0, 0.0)
	arrow_id = drawing.arrow((4.0, 0.0), (9.0, 0.0))
	end_id = ethanol(drawing, 11.0, 0.0)
	named_id = ethanol(drawing, 0.0, -6.0)
	return (drawing, start_id, arrow_id, end_id, named_id)


#============================================
def test_bold_label_on_the_arrow_adds_the_labelled_molecule():
	drawing, start_id, arrow_id, end_id, named_id = labelled_reaction_drawing()
	text_id = drawing.text([("3a", True)], (5.5, 0.4, 7.0, 1.0))
	work = working(drawing)
	work.mol_map[named_id].label = "3a"
	work.arrow_map[arrow_id].text_arr.append(text_id)
	reaction = add_reaction(work, arrow_id, reactants=[start_id], products=[end_id])
	replace_label_by_molecule(work)
	assert reaction.reagent_ids == [named_id]


#============================================
def test_plain_arrow_text_names_a_molecule_by_its_text():
	drawing, start_id, arrow_id, end_id, named_id = labelled_reaction_drawing()
	text_id = drawing.text([("catalyst, 2 equiv", False)], (4.5, 0.4, 8.5, 1.0))
	work = working(drawing)
	work.mol_map[named_id].text = "catalyst"
	work.mol_map[end_id].text = "equiv"
	work.arrow_map[arrow_id].text_arr.append(text_id)
	reaction = add_reaction(work, arrow_id, reactants=[start_id], products=[end_id])
	replace_label_by_molecule(work)
	assert reaction.reagent_ids == [named_id]


#============================================
def test_text_label_moves_a_molecule_into_the_reagents():
	drawing, start_id, arrow_id, end_id, named_id = labelled_reaction_drawing()
	text_id = drawing.text([("ligand, Pd(OAc)2", False)], (4.5, 0.4, 8.5, 1.0))
	work = working(drawing)
	work.mol_map[named_id].text = "ligand ="
	work.arrow_map[arrow_id].text_arr.append(text_id)
	reaction = add_reaction(
		work, arrow_id, reactants=[start_id], products=[end_id, named_id])
	refine_text_label(work)
	assert reaction.reagent_ids == [named_id]
	assert reaction.product_ids == [end_id]


#============================================
def test_text_label_not_named_on_any_arrow_is_left_alone():
	drawing, start_id, arrow_id, end_id, named_id = labelled_reaction_drawing()
	text_id = drawing.text([("THF", False)], (5.5, 0.4, 7.0, 1.0))
	work = working(drawing)
	work.mol_map[named_id].text = "ligand ="
	work.arrow_map[arrow_id].text_arr.append(text_id)
	reaction = add_reaction(
		work, arrow_id, reactants=[start_id], products=[end_id, named_id])
	refine_text_label(work)
	assert reaction.reagent_ids == []
	assert reaction.product_ids == [end_id, named_id]


#============================================
def text_as_molecule_work(text_bounds):
	drawing = cdxml_drawing.Drawing()
	arrow_id = drawing.arrow((4.0, 0.0), (9.0, 0.0))
	end_id = ethanol(drawing, 11.0, 0.0)
	text_id = drawing.text([("DMF", False)], text_bounds)
	lookup = LookupService({"DMF": "CN(C)C=O"}, {})
	work = working(drawing, lookup)
	work.mol_map[end_id].text_ids.append(text_id)
	work.arrow_map[arrow_id].build_polygons(1.0)
	reaction = add_reaction(work, arrow_id, products=[end_id])
	return (work, reaction, end_id, text_id)


#============================================
def test_abbreviation_on_the_head_line_becomes_a_product():
	work, reaction, end_id, text_id = text_as_molecule_work((15.0, -0.5, 17.0, 0.5))
	refine_text_as_molecule(work)
	assert reaction.product_ids == [end_id, text_id]
	assert text_id not in work.text_map
	assert text_id not in work.mol_map[end_id].text_ids
	promoted = work.mol_map[text_id]
	assert promoted.cano_smiles
	assert promoted.polygon is not None


#============================================
def test_abbreviation_inside_the_corridor_stays_text():
	work, reaction, end_id, text_id = text_as_molecule_work((6.0, 0.2, 7.0, 0.8))
	refine_text_as_molecule(work)
	assert reaction.product_ids == [end_id]
	assert text_id in work.text_map
	assert text_id in work.mol_map[end_id].text_ids


# ============================================
# repeat counts and text group variants
# ============================================

#============================================
def bracket_drawing(bracket_bounds):
	drawing = cdxml_drawing.Drawing()
	fragment_id, node_ids = drawing.fragment(
		cdxml_drawing.ethanol_atoms(0.0, 0.0), cdxml_drawing.CHAIN_BONDS)
	bracket_id = drawing.text([("(  )n", False)], bracket_bounds)
	return (drawing, fragment_id, node_ids, bracket_id)


#============================================
def test_bracket_text_around_one_atom_is_a_repeat_count():
	drawing, fragment_id, node_ids, bracket_id = bracket_drawing((0.7, -0.8, 1.3, -0.2))
	work = working(drawing)
	molecule = work.mol_map[fragment_id]
	molecule.text_ids.append(bracket_id)
	retrieve_n_atoms(work)
	assert work.n_atoms == {fragment_id: [AliasInfo(node_ids[1], "n", GENERATE_N_ATOM)]}
	assert bracket_id not in molecule.text_ids


#============================================
def test_bracket_text_over_two_atoms_is_ignored():
	drawing, fragment_id, _, bracket_id = bracket_drawing((-0.2, -0.8, 1.3, 0.8))
	work = working(drawing)
	molecule = work.mol_map[fragment_id]
	molecule.text_ids.append(bracket_id)
	retrieve_n_atoms(work)
	assert work.n_atoms == {}
	assert bracket_id in molecule.text_ids


#============================================
def test_repeat_count_range_expands_the_bracketed_atom():
	drawing, _, _, _ = bracket_drawing((0.7, -0.8, 1.3, -0.2))
	drawing.text([("n = 1-3", False)], (0.0, -2.5, 2.5, -1.9))
	document = chemscan.parse(drawing.cdxml())
	generated = [molecule for molecule in document.molecules if molecule.clone_from is not None]
	assert sorted(molecule.cano_smiles for molecule in generated) == ["CCCCO", "CCCO", "CCO"]


#============================================
def rgroup_reaction_work():
	"""An R-group reactant, its substituents written under the arrow."""
	drawing = cdxml_drawing.Drawing()
	start_id, _ = drawing.fragment(
		[
			(0.0, 0.0, {}),
			(1.0, 0.6, {}),
			(2.0, 0.0, {"NodeType": "GenericNickname", "GenericNickname": "R"}),
		],
		cdxml_drawing.CHAIN_BONDS,
	)
	arrow_id = drawing.arrow((4.0, 0.0), (9.0, 0.0))
	end_id = ethanol(drawing, 11.0, 0.0)
	text_id = drawing.text([("R = H, Me", False)], (5.0, -1.0, 8.0, -0.4))
	work = working(drawing)
	reaction = add_reaction(work, arrow_id, reactants=[start_id], products=[end_id])
	reaction.reactants = [work.mol_map[start_id]]
	reaction.products = [work.mol_map[end_id]]
	reaction.text_ids = [text_id]
	reaction.arrow = work.arrow_map[arrow_id]
	return (work, reaction, start_id, end_id)


#============================================
def test_reaction_variants_are_clones_with_fresh_ids():
	work, reaction, start_id, end_id = rgroup_reaction_work()
	text_group = ReactionTextGroup(reaction, retrieve_alias_info(work), work)
	text_group.interpret()
	generated = text_group.generate_reaction()
	assert len(generated) == 2
	arrow_ids = [cloned.arrow_id for cloned in generated]
	assert len(set(arrow_ids)) == 2
	assert all(arrow_id >= TEMP_ID_START for arrow_id in arrow_ids)
	assert all(cloned.clone_from == reaction.arrow_id for cloned in generated)
	reactants = [cloned.reactants[0] for cloned in generated]
	assert sorted(molecule.cano_smiles for molecule in reactants) == ["CC", "CCC"]
	assert all(molecule.clone_from == start_id for molecule in reactants)
	assert len({molecule.id for molecule in reactants}) == 2
	assert all(molecule.id >= TEMP_ID_START for molecule in reactants)
	for cloned in generated:
		assert cloned.products[0].id != end_id
		assert cloned.products[0].clone_from == end_id
		assert cloned.reactant_ids == [cloned.reactants[0].id]


#============================================
def test_reaction_variants_leave_the_drawn_reaction_alone():
	work, reaction, start_id, end_id = rgroup_reaction_work()
	text_group = ReactionTextGroup(reaction, retrieve_alias_info(work), work)
	text_group.interpret()
	text_group.generate_reaction()
	assert reaction.reactant_ids == [start_id]
	assert reaction.product_ids == [end_id]
	assert [molecule.id for molecule in reaction.reactants] == [start_id]
