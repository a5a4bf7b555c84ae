"""NiceGUI study page: text input, upload, and the three result tabs."""

import logging
import os

from nicegui import app, events, ui

from src.agent.client import get_generative_client
from src.exceptions import InputValidationError
from src.models.schemas import StudyTab
from src.session.controller import StudySessionController
from src.session.state import DisplayMode, StudySessionState
from src.ui.views import render_analysis, render_questions, render_topics

logger = logging.getLogger(__name__)

THEME_STORAGE_KEY = "theme"

LOADING_MESSAGES = [
    "Brewing coffee for the AI...",
    "Analyzing textual nuances...",
    "Generating insightful questions...",
    "Predicting key topics...",
    "Consulting the digital oracles...",
    "Almost there...",
]

TABS = [
    (StudyTab.ANALYSIS, "Summary & Keywords", "menu_book"),
    (StudyTab.QUESTIONS, "Question Generator", "auto_awesome"),
    (StudyTab.TOPICS, "Topic Prediction", "bar_chart"),
]

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;800&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }
    body { background: #f8fafc; min-height: 100vh; }
    body.body--dark { background: #020617; }
    .app-card {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.08);
    }
    .body--dark .app-card { background: #0f172a; }
    .analyze-btn { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%) !important; }
</style>
"""


class LoadingTicker:
    """Cycles through the loading messages while a run is in flight."""

    def __init__(self, messages: list[str] | None = None) -> None:
        self.messages = messages or LOADING_MESSAGES
        self.message = self.messages[0]

    def reset(self) -> None:
        self.message = self.messages[0]

    def advance(self) -> None:
        index = (self.messages.index(self.message) + 1) % len(self.messages)
        self.message = self.messages[index]


def load_theme() -> str:
    return app.storage.user.get(THEME_STORAGE_KEY, "light")


def save_theme(theme: str) -> None:
    app.storage.user[THEME_STORAGE_KEY] = theme


@ui.page("/")
def study_page() -> None:
    """Main study page."""
    ui.add_head_html(CUSTOM_CSS)

    dark = ui.dark_mode(value=load_theme() == "dark")
    ticker = LoadingTicker()

    try:
        client = get_generative_client()
    except ValueError as e:
        logger.error(f"Generative client unavailable: {e}")
        client = None

    def on_change(state: StudySessionState) -> None:
        file_chip.refresh()
        results_area.refresh()

    controller = StudySessionController(client, on_change=on_change)
    state = controller.state

    def toggle_theme() -> None:
        dark.value = not dark.value
        save_theme("dark" if dark.value else "light")
        theme_button.props(f"icon={'light_mode' if dark.value else 'dark_mode'}")
        results_area.refresh()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        data = await e.file.read()
        try:
            controller.load_file(e.file.name, e.file.content_type, data)
        except InputValidationError as err:
            ui.notify(str(err), type="negative")
        finally:
            upload.reset()

    async def analyze() -> None:
        try:
            controller.validate_input()
        except InputValidationError as err:
            ui.notify(str(err), type="warning")
            return
        if client is None:
            ui.notify("API key not configured. Set LLM_API_KEY in .env", type="negative")
            return
        ticker.reset()
        await controller.run()
        if state.error:
            ui.notify(state.error, type="warning")

    def rotate_loading_message() -> None:
        if state.is_loading:
            ticker.advance()

    @ui.refreshable
    def file_chip() -> None:
        if not state.file_name:
            return
        with ui.row().classes("items-center gap-2 bg-slate-100 rounded-full px-3 py-1"):
            ui.icon("description").classes("text-slate-500")
            ui.label(state.file_name).classes("text-sm text-slate-700")
            ui.button(icon="close", on_click=controller.clear_file).props("flat round dense")

    @ui.refreshable
    def results_area() -> None:
        mode = state.display_mode()

        if mode == DisplayMode.LOADING:
            with ui.column().classes("w-full min-h-[30rem] items-center justify-center"):
                ui.spinner(size="xl")
                ui.label().bind_text_from(ticker, "message").classes("mt-4 text-slate-500")
            return

        if mode == DisplayMode.EMPTY:
            with ui.column().classes(
                "w-full min-h-[30rem] items-center justify-center text-center"
            ):
                ui.icon("auto_awesome").classes("text-6xl text-indigo-200")
                ui.label("Your AI-generated insights will appear here.").classes(
                    "mt-4 text-slate-500"
                )
            return

        if mode == DisplayMode.ERROR:
            with ui.column().classes(
                "w-full min-h-[30rem] items-center justify-center text-center text-red-500"
            ):
                ui.icon("warning").classes("text-5xl mb-4")
                ui.label("An Error Occurred").classes("font-semibold")
                ui.label(state.error or "").classes("text-sm text-slate-500")
            return

        if state.error:
            with ui.row().classes(
                "w-full items-center gap-2 p-3 bg-amber-50 text-amber-700 rounded-lg"
            ):
                ui.icon("warning")
                ui.label(state.error).classes("text-sm")

        if state.active_tab == StudyTab.ANALYSIS:
            render_analysis(state.analysis)
        elif state.active_tab == StudyTab.QUESTIONS:
            render_questions(state.questions)
        else:
            render_topics(state.topics, dark=bool(dark.value))

    # === UI Layout ===
    with ui.column().classes("w-full max-w-screen-2xl mx-auto p-4 md:p-8 gap-8"):
        # Header
        with ui.row().classes("w-full items-center justify-between pb-6 border-b"):
            with ui.row().classes("items-center gap-4"):
                ui.icon("school").classes("text-4xl text-indigo-600")
                with ui.column().classes("gap-0"):
                    ui.label("AI Study Assistant").classes("text-3xl font-extrabold")
                    ui.label(
                        "Summaries, exam questions and topic predictions from your notes."
                    ).classes("text-slate-500")
            theme_button = ui.button(
                icon="light_mode" if dark.value else "dark_mode", on_click=toggle_theme
            ).props("flat round")

        with ui.row().classes("w-full gap-8 items-start flex-nowrap max-lg:flex-wrap"):
            # Input
            with ui.column().classes("app-card w-full lg:w-1/3 p-6 gap-4"):
                ui.label("Your Study Material").classes("text-xl font-bold")
                ui.textarea(
                    placeholder="Paste your notes, textbook chapter or past exam papers here..."
                ).props("outlined rows=14").classes("w-full").bind_value(state, "input_text")
                upload = (
                    ui.upload(
                        label="Upload a .txt file",
                        on_upload=handle_upload,
                        auto_upload=True,
                        max_files=1,
                    )
                    .props("accept=.txt flat bordered")
                    .classes("w-full")
                )
                file_chip()
                ui.button("Analyze", icon="auto_awesome", on_click=analyze).props(
                    "unelevated no-caps"
                ).classes("analyze-btn w-full text-white").bind_enabled_from(
                    state, "is_loading", backward=lambda loading: not loading
                )

            # Results
            with ui.column().classes("app-card w-full lg:w-2/3 gap-0"):
                with ui.tabs(
                    value=state.active_tab.value,
                    on_change=lambda e: controller.select_tab(e.value),
                ).classes("w-full border-b"):
                    for tab, label, icon in TABS:
                        ui.tab(tab.value, label=label, icon=icon).props("no-caps")
                results_area()

    ui.timer(2.0, rotate_loading_message)


def main() -> None:
    ui.run(
        title="AI Study Assistant",
        port=8080,
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "study-assistant-secret"),
    )


if __name__ == "__main__":
    main()
