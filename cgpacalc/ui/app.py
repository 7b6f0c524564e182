from __future__ import annotations

import logging
from typing import Any, Callable

import flet as ft

from cgpacalc.config.settings import settings
from cgpacalc.domain.gradebook import GradeBook, GradeBookError
from cgpacalc.domain.logic.grading import GRADE_LETTERS
from cgpacalc.domain.models.entities import Course, GradeMode

logger = logging.getLogger(__name__)

ACCENT = ft.Colors.BLUE_400


def _initial_mode() -> GradeMode:
    try:
        return GradeMode(settings.grade_mode)
    except ValueError:
        logger.warning("Unknown CGPACALC_GRADE_MODE %r, using numerical", settings.grade_mode)
        return GradeMode.NUMERICAL


def _blank_if_zero(value: Any) -> str:
    if value == 0 or value == "":
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class CGPACalculatorApp:
    def __init__(self, page: ft.Page) -> None:
        self.page = page
        self.page.title = "CGPA Calculator"
        self.page.scroll = ft.ScrollMode.AUTO
        self.book = GradeBook(_initial_mode())
        self.decimals = max(0, settings.decimals)
        self.show_mapping = False
        self.status = ft.Text(color=ft.Colors.RED_400)
        self.body = ft.Column(spacing=16)
        self.emoji_text = ft.Text(size=40)
        self.cgpa_text = ft.Text(size=40, weight=ft.FontWeight.BOLD, color=ACCENT)
        self.sgpa_texts: list[ft.Text] = []

    def run(self) -> None:
        self.page.add(self.body)
        self.render()

    def fmt(self, value: float) -> str:
        return f"{value:.{self.decimals}f}"

    def act(self, action: Callable[[], Any], *, rebuild: bool = True) -> None:
        try:
            action()
            self.status.value = ""
        except (GradeBookError, IndexError, ValueError) as exc:
            logger.warning("Rejected action: %s", exc)
            self.status.value = str(exc)
        if rebuild:
            self.render()
        else:
            self.refresh_totals()

    def edit_course(self, semester_index: int, course_index: int, field: str, value: Any) -> None:
        # field edits keep the existing controls so focus stays where the user put it
        self.act(lambda: self.book.edit_course(semester_index, course_index, field, value), rebuild=False)

    def edit_mapping(self, letter: str, value: Any) -> None:
        self.act(lambda: self.book.set_grade_mapping(letter, value), rebuild=False)

    def refresh_totals(self) -> None:
        self.emoji_text.value = self.book.emoji()
        self.cgpa_text.value = self.fmt(self.book.cgpa())
        for i, text in enumerate(self.sgpa_texts):
            text.value = f"SGPA: {self.fmt(self.book.sgpa(i))}"
        self.page.update()

    def render(self) -> None:
        self.sgpa_texts = [ft.Text(size=16, color=ACCENT, weight=ft.FontWeight.BOLD) for _ in self.book.semesters]
        controls: list[ft.Control] = [self.header_card()]
        if self.show_mapping and self.book.mode == GradeMode.LETTER:
            controls.append(self.mapping_card())
        controls.extend(self.semester_card(i) for i in range(len(self.book.semesters)))
        controls.append(
            ft.ElevatedButton(
                "Add Semester",
                icon=ft.Icons.ADD,
                on_click=lambda _: self.act(self.book.add_semester),
            )
        )
        controls.append(self.status)
        self.body.controls = controls
        self.refresh_totals()

    def header_card(self) -> ft.Control:
        mode = ft.Dropdown(
            label="Grade Mode",
            width=180,
            value=self.book.mode.value,
            options=[
                ft.dropdown.Option(GradeMode.NUMERICAL.value, "Numerical"),
                ft.dropdown.Option(GradeMode.LETTER.value, "Letter"),
            ],
            on_change=lambda e: self.act(lambda: self.book.set_mode(e.control.value)),
        )

        def toggle_mapping(_: ft.ControlEvent) -> None:
            self.show_mapping = not self.show_mapping
            self.render()

        settings_button = ft.IconButton(
            icon=ft.Icons.SETTINGS,
            icon_color=ACCENT if self.show_mapping else None,
            tooltip="Grade letter mapping",
            on_click=toggle_mapping,
        )
        return ft.Card(
            content=ft.Container(
                padding=16,
                content=ft.Column(
                    [
                        ft.Row(
                            [
                                ft.Row([ft.Icon(ft.Icons.SCHOOL, color=ACCENT), ft.Text("CGPA Calculator", size=24, weight=ft.FontWeight.BOLD)]),
                                ft.Row([mode, settings_button]),
                            ],
                            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                            wrap=True,
                        ),
                        ft.Row(
                            [
                                self.emoji_text,
                                self.cgpa_text,
                            ],
                            alignment=ft.MainAxisAlignment.CENTER,
                        ),
                    ]
                ),
            )
        )

    def mapping_card(self) -> ft.Control:
        mapping = self.book.mapping
        rows = []
        for letter in GRADE_LETTERS:
            rows.append(
                ft.Row(
                    [
                        ft.Text(letter, width=80, weight=ft.FontWeight.BOLD),
                        ft.TextField(
                            value=_blank_if_zero(mapping[letter]) or "0",
                            width=100,
                            keyboard_type=ft.KeyboardType.NUMBER,
                            on_change=lambda e, letter=letter: self.edit_mapping(letter, e.control.value),
                        ),
                    ]
                )
            )
        return ft.Card(
            content=ft.Container(
                padding=16,
                content=ft.Column(
                    [
                        ft.Text("Grade Letter Mapping", size=18, weight=ft.FontWeight.BOLD),
                        ft.Text("Customize the numerical value for each letter grade."),
                        *rows,
                        ft.TextButton("Reset to defaults", on_click=lambda _: self.act(self.book.reset_grade_mapping)),
                    ]
                ),
            )
        )

    def grade_input(self, semester_index: int, course_index: int, course: Course) -> ft.Control:
        def on_grade(e: ft.ControlEvent) -> None:
            self.edit_course(semester_index, course_index, "grade", e.control.value)

        if self.book.mode == GradeMode.NUMERICAL:
            return ft.TextField(
                label="Grade",
                value=_blank_if_zero(course.grade),
                hint_text="0",
                width=90,
                keyboard_type=ft.KeyboardType.NUMBER,
                on_change=on_grade,
            )
        return ft.Dropdown(
            label="Grade",
            width=110,
            value=course.grade if course.grade in GRADE_LETTERS else None,
            options=[ft.dropdown.Option(letter) for letter in GRADE_LETTERS],
            on_change=on_grade,
        )

    def course_row(self, semester_index: int, course_index: int, course: Course) -> ft.Control:
        def edit(field: str) -> Callable[[ft.ControlEvent], None]:
            return lambda e: self.edit_course(semester_index, course_index, field, e.control.value)

        return ft.Row(
            [
                ft.TextField(label="Course Name", value=course.name, expand=True, on_change=edit("name")),
                ft.TextField(
                    label="Credits",
                    value=_blank_if_zero(course.credits),
                    hint_text="0",
                    width=90,
                    keyboard_type=ft.KeyboardType.NUMBER,
                    on_change=edit("credits"),
                ),
                self.grade_input(semester_index, course_index, course),
                ft.IconButton(
                    icon=ft.Icons.DELETE,
                    icon_color=ft.Colors.RED_400,
                    on_click=lambda _: self.act(lambda: self.book.remove_course(semester_index, course_index)),
                ),
            ]
        )

    def semester_card(self, semester_index: int) -> ft.Control:
        semester = self.book.semesters[semester_index]
        rows = [self.course_row(semester_index, i, c) for i, c in enumerate(semester.courses)]
        return ft.Card(
            content=ft.Container(
                padding=16,
                content=ft.Column(
                    [
                        ft.Row(
                            [
                                ft.Row([ft.Icon(ft.Icons.BOOK, color=ACCENT), ft.Text(f"Semester {semester_index + 1}", size=20, weight=ft.FontWeight.BOLD)]),
                                ft.IconButton(
                                    icon=ft.Icons.DELETE_OUTLINE,
                                    tooltip="Remove semester",
                                    on_click=lambda _: self.act(lambda: self.book.remove_semester(semester_index)),
                                ),
                            ],
                            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                        ),
                        self.sgpa_texts[semester_index],
                        *rows,
                        ft.OutlinedButton(
                            "Add Course",
                            icon=ft.Icons.ADD,
                            on_click=lambda _: self.act(lambda: self.book.add_course(semester_index)),
                        ),
                    ]
                ),
            )
        )


def main(page: ft.Page) -> None:
    CGPACalculatorApp(page).run()
