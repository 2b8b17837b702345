"""Outbound email jobs for MoM delivery and reminders."""

from momintel.delivery.queue import (
    DeliveryQueue,
    EmailSender,
    create_mom_email_job,
    create_reminder_jobs,
)

__all__ = [
    "DeliveryQueue",
    "EmailSender",
    "create_mom_email_job",
    "create_reminder_jobs",
]
