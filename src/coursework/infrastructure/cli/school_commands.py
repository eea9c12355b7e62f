"""CLI commands for the school grading exercise."""

from __future__ import annotations

from pathlib import Path

import click

from coursework.application.grade_students import GradeStudentsHandler
from coursework.domain.exceptions import DomainException
from coursework.infrastructure.bootstrap import report_file, students_file


@click.command("grade")
@click.option(
    "--input",
    "input_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Student records file (id, name, score per line).",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the graded report.",
)
def school_grade(input_path: Path | None, output_path: Path | None) -> None:
    """Grade every student in the records file and write a report."""
    handler = GradeStudentsHandler()

    try:
        result = handler.handle(
            input_path=input_path or students_file(),
            output_path=output_path or report_file(),
        )
    except FileNotFoundError as exc:
        raise click.ClickException(f"Input file not found: {exc.filename}")
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except OSError as exc:
        raise click.ClickException(f"An error occurred: {exc}")

    if result.sample_created:
        click.echo(f"Students file not found. Sample file created at: {result.input_path}")
        click.echo("Run the program again to process the file.")
        return

    click.echo(f"Report generated successfully for {result.student_count} student(s).")
    click.echo(f"Report saved to: {result.output_path}")
