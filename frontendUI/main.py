"""
Main application file combining the simulation, quiz and tutor tabs.
"""
import argparse

import gradio as gr

from errors import ConfigurationError
from frontendUI import quiz_ui, simulations_ui, tutor_ui
from frontendUI.config import (
    APP_TAGLINE, APP_TITLE, CUSTOM_CSS, LOG_DIR, POLL_SECONDS, SERVER_NAME, SERVER_PORT,
)
from llm.config import get_api_key, get_provider_config, load_config
from logging_config import get_logger, setup_logging
from simulations import amino_builder, folding, matching, peptide
from quiz_session import loading_session

logger = get_logger(__name__)


def create_app():
    """Create and configure the Gradio application"""
    with gr.Blocks(title=APP_TITLE) as demo:
        gr.Markdown(f"# 🧬 {APP_TITLE}\n{APP_TAGLINE}")

        # Per-session state
        builder_state = gr.State(amino_builder.initial_state())
        peptide_state = gr.State(peptide.initial_state())
        fold_state = gr.State(folding.initial_state())
        matching_state = gr.State(matching.new_game())
        quiz_state = gr.State(loading_session())

        with gr.Tab("Structure"):
            gr.Markdown("## Build an Amino Acid\nSelect a functional group and attach it to the correct side of the alpha carbon.")
            with gr.Row():
                with gr.Column(scale=2):
                    builder_canvas = gr.HTML(elem_classes=["canvas-panel"])
                    with gr.Row():
                        zone_buttons = {zone: gr.Button(f"Attach {zone}", size="sm") for zone in amino_builder.ZONES}
                with gr.Column(scale=1):
                    builder_parts = gr.Radio(choices=[], label="Functional groups")
                    builder_msg = gr.Markdown(elem_classes=["hint-banner"])
                    builder_reset_btn = gr.Button("Reset", variant="secondary")

        with gr.Tab("Synthesis"):
            gr.Markdown("## Peptide Bond Formation\nA condensation reaction joins two amino acids and releases water.")
            with gr.Row():
                with gr.Column(scale=2):
                    peptide_canvas = gr.HTML(elem_classes=["canvas-panel"])
                with gr.Column(scale=1):
                    peptide_instruction = gr.Markdown()
                    atom_buttons = [(gr.Button(label, size="sm"), atom) for label, atom in simulations_ui.ATOM_BUTTONS]
                    form_bond_btn = gr.Button("Form Peptide Bond", variant="primary", interactive=False)
                    peptide_hint = gr.Markdown(elem_classes=["hint-banner"])
                    peptide_reset_btn = gr.Button("Reset", variant="secondary")

        with gr.Tab("Folding"):
            with gr.Row():
                with gr.Column(scale=2):
                    fold_canvas = gr.HTML(elem_classes=["canvas-panel"])
                    fold_status = gr.Textbox(label="Status", interactive=False)
                with gr.Column(scale=1):
                    stage_info = gr.Markdown(elem_classes=["stage-card"])
                    fold_action_btn = gr.Button(variant="primary")
                    variant_row = gr.Row(visible=False)
                    with variant_row:
                        helix_btn = gr.Button("Alpha Helix", size="sm")
                        sheet_btn = gr.Button("Beta Sheet", size="sm")
                    denature_btn = gr.Button("Denature (heat / pH)", variant="stop", visible=False)
                    fold_next_btn = gr.Button("Next Stage", visible=False)
                    fold_reset_btn = gr.Button("Restart", variant="secondary")

        with gr.Tab("Functions"):
            gr.Markdown("## Protein Functions\nSelect a protein, then pick the description of what it does.")
            with gr.Row():
                protein_choices = gr.Radio(choices=[], label="Proteins")
                definition_choices = gr.Radio(choices=[], label="Functions")
            matching_msg = gr.Markdown(elem_classes=["hint-banner"])
            matching_reset_btn = gr.Button("Play Again", variant="secondary")

        with gr.Tab("Quiz"):
            quiz_progress = gr.Markdown("Loading questions...")
            quiz_question = gr.Markdown()
            quiz_choices = gr.Radio(choices=[], label="Choices", visible=False)
            quiz_explanation = gr.Markdown()
            quiz_next_btn = gr.Button("Next Question", visible=False)
            quiz_result = gr.Markdown(visible=False, elem_classes=["success-banner"])
            quiz_restart_btn = gr.Button("New Quiz", variant="secondary")

        with gr.Accordion("🤖 AI Biology Tutor", open=False):
            tutor_chat = gr.Chatbot(height=300, type="messages")
            with gr.Row():
                tutor_msg = gr.Textbox(
                    label="Question",
                    placeholder=tutor_ui.TUTOR_PLACEHOLDER,
                    scale=8
                )
                tutor_send_btn = gr.Button("Ask", scale=1)

        # Event handling
        builder_outputs = [builder_state, builder_canvas, builder_parts, builder_msg]
        builder_parts.input(simulations_ui.builder_select, [builder_state, builder_parts], builder_outputs)
        for zone, button in zone_buttons.items():
            button.click(lambda state, z=zone: simulations_ui.builder_place(state, z), [builder_state], builder_outputs)
        builder_reset_btn.click(simulations_ui.builder_reset, [builder_state], builder_outputs)

        peptide_outputs = [peptide_state, peptide_canvas, peptide_instruction, peptide_hint, form_bond_btn]
        for button, atom in atom_buttons:
            button.click(lambda state, a=atom: simulations_ui.peptide_select(state, a.value), [peptide_state], peptide_outputs)
        form_bond_btn.click(simulations_ui.peptide_form_bond, [peptide_state], peptide_outputs)
        peptide_reset_btn.click(simulations_ui.peptide_reset, [peptide_state], peptide_outputs)

        fold_outputs = [fold_state, fold_canvas, stage_info, fold_status, fold_action_btn,
                        fold_next_btn, variant_row, denature_btn]
        fold_action_btn.click(simulations_ui.folding_trigger, [fold_state], fold_outputs)
        fold_next_btn.click(simulations_ui.folding_advance, [fold_state], fold_outputs)
        helix_btn.click(simulations_ui.folding_helix, [fold_state], fold_outputs)
        sheet_btn.click(simulations_ui.folding_sheet, [fold_state], fold_outputs)
        denature_btn.click(simulations_ui.folding_denature, [fold_state], fold_outputs)
        fold_reset_btn.click(simulations_ui.folding_reset, [fold_state], fold_outputs)

        matching_outputs = [matching_state, protein_choices, definition_choices, matching_msg]
        protein_choices.input(simulations_ui.matching_select_protein, [matching_state, protein_choices], matching_outputs)
        definition_choices.input(simulations_ui.matching_select_definition, [matching_state, definition_choices], matching_outputs)
        matching_reset_btn.click(simulations_ui.matching_reset, [matching_state], matching_outputs)

        quiz_outputs = [quiz_state, quiz_progress, quiz_question, quiz_choices,
                        quiz_explanation, quiz_next_btn, quiz_result]
        quiz_choices.input(quiz_ui.record_answer, [quiz_state, quiz_choices], quiz_outputs)
        quiz_next_btn.click(quiz_ui.next_question, [quiz_state], quiz_outputs)
        quiz_restart_btn.click(quiz_ui.start_new_quiz, [quiz_state], quiz_outputs).then(
            quiz_ui.load_quiz, [quiz_state], quiz_outputs)

        tutor_msg.submit(tutor_ui.ask_tutor, [tutor_msg, tutor_chat], [tutor_msg, tutor_chat])
        tutor_send_btn.click(tutor_ui.ask_tutor, [tutor_msg, tutor_chat], [tutor_msg, tutor_chat])

        # Finish due animations and expire hints
        timer = gr.Timer(POLL_SECONDS)
        timer.tick(
            simulations_ui.refresh,
            inputs=[fold_state, peptide_state, matching_state, builder_state],
            outputs=fold_outputs + [peptide_hint, matching_msg, builder_msg],
            show_progress="hidden",
        )

        demo.load(simulations_ui.builder_view, [builder_state], builder_outputs)
        demo.load(simulations_ui.peptide_view, [peptide_state], peptide_outputs)
        demo.load(simulations_ui.folding_view, [fold_state], fold_outputs)
        demo.load(simulations_ui.matching_view, [matching_state], matching_outputs)
        demo.load(quiz_ui.load_quiz, [quiz_state], quiz_outputs)

    demo.css = CUSTOM_CSS
    return demo


def log_credential_status():
    """Report once at startup whether AI features can run."""
    try:
        config = load_config()
        provider = get_provider_config(config["defaults"]["provider"])
    except ConfigurationError as e:
        logger.error(f"LLM configuration unavailable: {e}")
        return
    env_var = provider.get("api_key_env", "API_KEY")
    if get_api_key(env_var, provider.get("api_key_fallback_env", [])):
        logger.info(f"AI features enabled ({provider.get('type')})")
    else:
        logger.warning(f"No {env_var} set: quizzes use the built-in questions and the tutor is disabled")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=f"{APP_TITLE}: {APP_TAGLINE}")
    parser.add_argument("--host", default=SERVER_NAME, help="Interface to bind")
    parser.add_argument("--port", type=int, default=SERVER_PORT, help="Port to listen on")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-dir", default=LOG_DIR, help="Also write logs to this directory")
    parser.add_argument("--share", action="store_true", help="Create a public Gradio link")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(level=args.log_level, log_dir=args.log_dir)
    log_credential_status()

    app = create_app()
    logger.info(f"Starting {APP_TITLE} on {args.host}:{args.port}")
    app.launch(
        server_name=args.host,
        server_port=args.port,
        share=args.share,
        show_error=True
    )


if __name__ == "__main__":
    main()
