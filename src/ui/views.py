"""Result views for the three study tasks.

Each ``render_*`` function draws one result slot into the current NiceGUI
container. An absent slot shows a fixed placeholder. The helpers above the
renderers hold the formatting rules and carry no UI state.
"""

from typing import Any

from nicegui import ui

from src.models.schemas import MCQ, AnalysisResult, GeneratedQuestions, Topic

ANALYSIS_PLACEHOLDER = "Summary and keywords will be displayed here after analysis."
QUESTIONS_PLACEHOLDER = "Generated questions will be displayed here after analysis."
TOPICS_PLACEHOLDER = "Predicted topics chart will be displayed here after analysis."

# (grid, axis, tick, bar) colours per theme
CHART_COLORS = {
    "light": ("#e2e8f0", "#64748b", "#334155", "#4f46e5"),
    "dark": ("#334155", "#94a3b8", "#e2e8f0", "#38bdf8"),
}

CARD_CLASSES = "w-full p-4 bg-slate-50 dark:bg-slate-800/50 rounded-lg border border-slate-200"
HEADING_CLASSES = "text-xl font-bold text-slate-800 dark:text-slate-100"


def sort_topics(topics: list[Topic]) -> list[Topic]:
    """Order topics by descending probability; ties keep their input order."""
    return sorted(topics, key=lambda t: -t.probability)


def option_label(index: int) -> str:
    """Letter for the index-th MCQ option (0 -> "a")."""
    return chr(ord("a") + index)


def answer_button_text(shown: bool) -> str:
    return "Hide Answer" if shown else "Show Answer"


def first_long_answer(questions: GeneratedQuestions) -> str | None:
    """Only the first long-answer question is displayed."""
    return questions.long_answers[0] if questions.long_answers else None


def topic_chart_options(topics: list[Topic], dark: bool = False) -> dict[str, Any]:
    """Build ECharts options for a horizontal probability bar chart.

    Topics are sorted before plotting; the most likely one is drawn on top.
    """
    grid_color, axis_color, tick_color, bar_color = CHART_COLORS["dark" if dark else "light"]
    ordered = sort_topics(topics)

    return {
        "grid": {"left": 20, "right": 20, "top": 40, "bottom": 5, "containLabel": True},
        "tooltip": {"trigger": "axis", "formatter": "{b}<br/>Probability: {c}%"},
        "legend": {"data": ["Probability (%)"], "textStyle": {"color": tick_color}},
        "xAxis": {
            "type": "value",
            "min": 0,
            "max": 100,
            "axisLine": {"lineStyle": {"color": axis_color}},
            "axisLabel": {"formatter": "{value}%", "color": tick_color},
            "splitLine": {"lineStyle": {"type": "dashed", "color": grid_color}},
        },
        "yAxis": {
            "type": "category",
            "inverse": True,
            "data": [t.topic for t in ordered],
            "axisLine": {"show": False},
            "axisTick": {"show": False},
            "axisLabel": {"color": tick_color, "width": 140, "overflow": "truncate"},
        },
        "series": [
            {
                "name": "Probability (%)",
                "type": "bar",
                "barWidth": 20,
                "itemStyle": {"color": bar_color},
                "data": [t.probability for t in ordered],
            }
        ],
    }


def _placeholder(message: str) -> None:
    ui.label(message).classes("w-full p-6 text-center text-slate-500")


def render_analysis(result: AnalysisResult | None) -> None:
    """Summary with a copy button, followed by keyword chips."""
    if result is None:
        _placeholder(ANALYSIS_PLACEHOLDER)
        return

    def copy_summary() -> None:
        ui.clipboard.write(result.summary)
        ui.notify("Copied!", type="positive")

    with ui.column().classes("w-full p-6 gap-6"):
        with ui.column().classes("w-full gap-3"):
            with ui.row().classes("w-full items-center justify-between"):
                ui.label("Summary").classes(HEADING_CLASSES)
                ui.button("Copy", icon="content_copy", on_click=copy_summary).props(
                    "outline dense no-caps"
                )
            ui.label(result.summary).classes(
                "text-slate-600 leading-relaxed whitespace-pre-wrap"
            )

        with ui.column().classes("w-full gap-3"):
            ui.label("Keywords").classes(HEADING_CLASSES)
            with ui.row().classes("flex-wrap gap-2"):
                for keyword in result.keywords:
                    ui.label(keyword).classes(
                        "px-3 py-1 bg-indigo-100 text-indigo-800 text-sm font-medium rounded-full"
                    )


def _render_mcq(mcq: MCQ, index: int) -> None:
    with ui.column().classes(f"{CARD_CLASSES} gap-2"):
        ui.label(f"{index + 1}. {mcq.question}").classes("font-medium text-slate-700")
        for i, option in enumerate(mcq.options):
            ui.label(f"{option_label(i)}) {option}").classes("text-slate-600 pl-2")

        answer = ui.label(f"Answer: {mcq.answer}").classes(
            "text-emerald-600 font-semibold text-sm"
        )
        answer.set_visibility(False)

        def toggle_answer() -> None:
            answer.set_visibility(not answer.visible)
            button.set_text(answer_button_text(answer.visible))

        button = ui.button(answer_button_text(False), on_click=toggle_answer).props(
            "flat dense no-caps"
        )


def render_questions(result: GeneratedQuestions | None) -> None:
    """MCQs with per-item answer reveal, short-answer list, one long question."""
    if result is None:
        _placeholder(QUESTIONS_PLACEHOLDER)
        return

    with ui.column().classes("w-full p-6 gap-8"):
        with ui.column().classes("w-full gap-4"):
            ui.label("Multiple Choice Questions").classes(HEADING_CLASSES)
            for index, mcq in enumerate(result.mcqs):
                _render_mcq(mcq, index)

        with ui.column().classes("w-full gap-4"):
            ui.label("Short Answer Questions").classes(HEADING_CLASSES)
            with ui.column().classes(f"{CARD_CLASSES} gap-3"):
                for index, question in enumerate(result.short_answers):
                    ui.label(f"{index + 1}. {question}").classes("text-slate-700 pl-2")

        long_answer = first_long_answer(result)
        with ui.column().classes("w-full gap-4"):
            ui.label("Long Answer Question").classes(HEADING_CLASSES)
            with ui.column().classes(CARD_CLASSES):
                ui.label(long_answer or "").classes(
                    "text-slate-700 leading-relaxed whitespace-pre-wrap"
                )


def render_topics(result: list[Topic] | None, dark: bool = False) -> None:
    """Horizontal bar chart of topics by exam probability."""
    if result is None:
        _placeholder(TOPICS_PLACEHOLDER)
        return

    with ui.column().classes("w-full p-6 gap-6"):
        ui.label("Predicted Exam Topics").classes(f"{HEADING_CLASSES} w-full text-center")
        ui.echart(topic_chart_options(result, dark)).classes("w-full").style("height: 400px")
