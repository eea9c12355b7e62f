"""CLI commands for the healthcare exercise."""

from __future__ import annotations

from datetime import datetime

import click

from coursework.application import sample_data
from coursework.application.lookup_prescriptions import (
    ListPatientsHandler,
    LookupPrescriptionsHandler,
)
from coursework.domain.model.healthcare import Patient, Prescription
from coursework.domain.repository.keyed_repository import KeyedRepository
from coursework.infrastructure.bootstrap import (
    patient_repository,
    prescription_repository,
)


def _seeded_patients() -> KeyedRepository[str, Patient]:
    repo = patient_repository()
    for patient in sample_data.patients():
        repo.add(patient)
    return repo


def _seeded_prescriptions() -> KeyedRepository[str, Prescription]:
    repo = prescription_repository()
    for prescription in sample_data.prescriptions(datetime.now()):
        repo.add(prescription)
    return repo


def _echo_patients() -> None:
    for p in ListPatientsHandler(_seeded_patients()).handle():
        click.echo(f"ID: {p.id}, Name: {p.name}, Age: {p.age}, Gender: {p.gender}")


@click.command("patients")
def health_patients() -> None:
    """List all patients."""
    click.echo("All Patients:")
    _echo_patients()


@click.command("prescriptions")
@click.option("--patient", "patient_id", default=None, help="Patient ID (prompted if omitted).")
def health_prescriptions(patient_id: str | None) -> None:
    """Show the prescriptions issued to one patient."""
    if patient_id is None:
        click.echo("All Patients:")
        _echo_patients()
        click.echo()
        patient_id = click.prompt("Enter Patient ID to view prescriptions")

    handler = LookupPrescriptionsHandler(_seeded_prescriptions())
    prescriptions = handler.handle(patient_id)

    click.echo(f"\nPrescriptions for Patient ID {patient_id}:")
    if not prescriptions:
        click.echo("No prescriptions found.")
        return

    for p in prescriptions:
        click.echo(
            f"Prescription ID: {p.id}, Medication: {p.medication_name}, "
            f"Date Issued: {p.date_issued}"
        )
