import logging
from functools import partial

import gradio as gr

from formulizer.config import settings, setup_logging
from formulizer.handlers import (
    close_about_handler,
    close_session,
    copy_formula_handler,
    copy_revert_handler,
    field_change_handler,
    formulize_handler,
    init_session_handler,
    open_about_handler,
)
from formulizer.reference_data import get_help_content, render_help_markdown
from formulizer.ux import COPY_ERROR_FALLBACK, EMPTY_FORMULA_PLACEHOLDER

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

COPY_JS = f"""async (formula) => {{
    try {{
        await navigator.clipboard.writeText(formula || '{EMPTY_FORMULA_PLACEHOLDER}');
        return '';
    }} catch (e) {{
        return (e && e.message) || '{COPY_ERROR_FALLBACK}';
    }}
}}"""

# --- UI Definition ---
with gr.Blocks(title="Formulizer") as demo:
    # State
    session_state = gr.State(value=None, delete_callback=close_session)

    # Header
    with gr.Row():
        gr.Markdown("# Formulizer")
        about_btn = gr.Button("About", size="sm", scale=0)

    with gr.Group(visible=False) as about_modal:
        gr.Markdown(render_help_markdown(get_help_content()))
        close_about_btn = gr.Button("Close", size="sm")

    with gr.Row():
        # Left Panel: Inputs
        with gr.Column(scale=1):
            object_selector = gr.Dropdown(label="Object", choices=[], interactive=True)
            return_type_selector = gr.Dropdown(label="Formula Return Type", choices=[], interactive=True)
            handle_blank_checkbox = gr.Checkbox(label="Handle Blank Field Values in Formula", value=False)
            formula_input = gr.Textbox(label="Enter Your Formula", lines=8, placeholder="IF(ISBLANK(Name), 'n/a', Name)")
            with gr.Row():
                copy_btn = gr.Button("📋 Copy Formula!")
                copy_error_box = gr.Textbox(visible=False)
                formulize_btn = gr.Button("Formulize", variant="primary", interactive=False)

        # Right Panel: Results
        with gr.Column(scale=2):
            status_msg = gr.Textbox(label="Status", interactive=False)
            results_table = gr.Dataframe(label="Formula Results", interactive=False, visible=False, wrap=True)

    demo.load(
        fn=init_session_handler,
        inputs=None,
        outputs=[session_state, object_selector, return_type_selector, formulize_btn],
    )

    for field_id, component in (
        ("object", object_selector),
        ("return_type", return_type_selector),
        ("formula", formula_input),
        ("handle_blank_values", handle_blank_checkbox),
    ):
        component.change(
            fn=partial(field_change_handler, field_id),
            inputs=[session_state, component],
            outputs=[formulize_btn],
        )

    formulize_btn.click(
        fn=formulize_handler,
        inputs=[session_state],
        outputs=[results_table, status_msg],
    )

    copy_btn.click(fn=None, inputs=[formula_input], outputs=[copy_error_box], js=COPY_JS).then(
        fn=copy_formula_handler,
        inputs=[session_state, formula_input, copy_error_box],
        outputs=[copy_btn],
    ).then(
        fn=copy_revert_handler,
        inputs=[session_state],
        outputs=[copy_btn],
        concurrency_limit=None,
    )

    about_btn.click(fn=open_about_handler, inputs=[session_state], outputs=[about_modal])
    close_about_btn.click(fn=close_about_handler, inputs=[session_state], outputs=[about_modal])

if __name__ == "__main__":
    logger.info(f"Starting Formulizer on {settings.SERVER_HOST}:{settings.SERVER_PORT}")
    demo.launch(server_name=settings.SERVER_HOST, server_port=settings.SERVER_PORT)
