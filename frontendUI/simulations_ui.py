"""
Structure, Synthesis, Folding and Functions tab logic.

Handlers take the tab's state from `gr.State`, apply one transition and
return the new state followed by the component updates for that tab.
"""
import gradio as gr

from frontendUI import render
from simulations import amino_builder, folding, matching, peptide
from simulations.timer import monotonic_clock
from states import SecondaryVariant, Stage

# ---------------------------------------------------------------------------
# Amino acid builder
# ---------------------------------------------------------------------------


def builder_part_choices(state):
    return [(spec["label"], part) for part, spec in amino_builder.PARTS.items()
            if not amino_builder.is_placed(state, part)]


def builder_message(state, now):
    if amino_builder.is_complete(state):
        return ("**Excellent! Structure Assembled.** Every amino acid shares this core: "
                "an amine group, a carboxyl group, a hydrogen and a variable R group around the alpha carbon.")
    return amino_builder.visible_hint(state, now) or "Pick a group, then click where it attaches."


def builder_view(state):
    return (
        state,
        render.builder_html(state),
        gr.update(choices=builder_part_choices(state), value=state.selected_part,
                  interactive=not amino_builder.is_complete(state)),
        builder_message(state, monotonic_clock()),
    )


def builder_select(state, part):
    return builder_view(amino_builder.select_part(state, part))


def builder_place(state, zone):
    return builder_view(amino_builder.place(state, zone, monotonic_clock()))


def builder_reset(state):
    return builder_view(amino_builder.reset(state))


# ---------------------------------------------------------------------------
# Peptide bond synthesis
# ---------------------------------------------------------------------------

ATOM_BUTTONS = [
    ("First amino acid: -OH of carboxyl", peptide.Atom.CARBOXYL_HYDROXYL),
    ("First amino acid: C=O oxygen", peptide.Atom.CARBONYL_OXYGEN),
    ("First amino acid: alpha hydrogen", peptide.Atom.ALPHA_HYDROGEN),
    ("Second amino acid: -H of amine", peptide.Atom.AMINE_HYDROGEN),
    ("Second amino acid: nitrogen", peptide.Atom.AMINE_NITROGEN),
    ("Second amino acid: alpha carbon", peptide.Atom.ALPHA_CARBON),
    ("Second amino acid: R group", peptide.Atom.R_GROUP),
]


def peptide_view(state):
    hint = peptide.visible_hint(state, monotonic_clock())
    return (
        state,
        render.peptide_svg(state),
        f"**{peptide.instruction(state)}**",
        hint or "",
        gr.update(interactive=state.step == peptide.HYDROGEN_SELECTED),
    )


def peptide_select(state, atom_value):
    return peptide_view(peptide.select_atom(state, peptide.Atom(atom_value), monotonic_clock()))


def peptide_form_bond(state):
    return peptide_view(peptide.form_bond(state))


def peptide_reset(state):
    return peptide_view(peptide.reset(state))


# ---------------------------------------------------------------------------
# Folding simulation
# ---------------------------------------------------------------------------


def stage_markdown(state):
    stage = folding.STAGES[state.current_stage]
    steps = []
    for s in Stage:
        if state.is_completed(s) and s < state.current_stage:
            steps.append(f"✅ {folding.STAGES[s]['title'].split()[0]}")
        elif s == state.current_stage:
            steps.append(f"**▶ {folding.STAGES[s]['title'].split()[0]}**")
        else:
            steps.append(folding.STAGES[s]["title"].split()[0])
    text = " → ".join(steps)
    text += f"\n\n### Stage {state.current_stage + 1}: {stage['title']}\n#### {stage['subtitle']}\n\n"
    text += stage["description"]
    if stage["hint"]:
        text += f"\n\n> ℹ️ {stage['hint']}"
    return text


def folding_view(state):
    completed_here = state.is_completed(state.current_stage)
    stage = folding.STAGES[state.current_stage]
    return (
        state,
        render.folding_svg(state),
        stage_markdown(state),
        folding.status_text(state),
        gr.update(value="Synthesizing..." if state.is_animating else stage["action_label"],
                  interactive=folding.can_trigger(state), visible=not completed_here),
        gr.update(visible=folding.can_advance(state)),
        gr.update(visible=state.current_stage == Stage.SECONDARY and completed_here),
        gr.update(visible=folding.can_denature(state)),
    )


def folding_trigger(state):
    now = monotonic_clock()
    state = folding.tick(state, now)
    return folding_view(folding.trigger_action(state, now))


def folding_advance(state):
    return folding_view(folding.advance(folding.tick(state, monotonic_clock())))


def folding_helix(state):
    return folding_view(folding.select_variant(state, SecondaryVariant.HELIX))


def folding_sheet(state):
    return folding_view(folding.select_variant(state, SecondaryVariant.SHEET))


def folding_denature(state):
    return folding_view(folding.denature(state))


def folding_reset(state):
    return folding_view(folding.reset(state))


# ---------------------------------------------------------------------------
# Protein function matching
# ---------------------------------------------------------------------------


def matching_message(state, now):
    if matching.is_complete(state):
        return "### Mastery Achieved!\nYou've correctly identified the functions of key biological proteins."
    return matching.visible_notice(state, now) or (
        f"Matched {len(state.matched_ids)} of {len(matching.CATALOG_IDS)}. "
        "Select a protein, then click its matching description."
    )


def matching_view(state):
    done = matching.is_complete(state)
    message = matching_message(state, monotonic_clock())
    proteins = [(f"{p.name} ({p.category})", p.id) for p in matching.remaining_proteins(state)]
    definitions = [(p.description, p.id) for p in matching.remaining_definitions(state)]
    return (
        state,
        gr.update(choices=proteins, value=state.selected_protein_id, visible=not done),
        gr.update(choices=definitions, value=None, visible=not done),
        message,
    )


def matching_select_protein(state, protein_id):
    return matching_view(matching.select_protein(state, protein_id))


def matching_select_definition(state, definition_id):
    return matching_view(matching.select_definition(state, definition_id, monotonic_clock()))


def matching_reset(state):
    return matching_view(matching.reset())


# ---------------------------------------------------------------------------
# Polling
# ---------------------------------------------------------------------------


def refresh(fold_state, peptide_state, matching_state, builder_state):
    """Called by the page timer: finish due animations and expire hints."""
    now = monotonic_clock()
    ticked = folding.tick(fold_state, now)
    fold_updates = folding_view(ticked) if ticked != fold_state else (ticked,) + (gr.update(),) * 7
    peptide_hint = peptide.visible_hint(peptide_state, now) or ""
    return fold_updates + (
        peptide_hint,
        matching_message(matching_state, now),
        builder_message(builder_state, now),
    )
