"""
Employee summary rendering.

The summary is the text that gets embedded and searched, so its layout must be
identical for every record: identity and role first, then skills, reviews,
location, benefits, emergency contact and notes.
"""

from datetime import date, datetime, time, timezone
from typing import Union

from .models import EmployeeRecord, PerformanceReview


def format_date(value: date) -> str:
    """Render a date as a UTC ISO-8601 timestamp, e.g. 2024-01-01T00:00:00.000Z."""
    stamp = datetime.combine(value, time.min, tzinfo=timezone.utc)
    return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_number(value: Union[int, float]) -> str:
    """Whole numbers render without a decimal part (4.0 -> 4)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_review(review: PerformanceReview) -> str:
    return (
        f"Review date: {format_date(review.review_date)}\n"
        f"Rating: {format_number(review.rating)}\n"
        f"Comments: {review.comments}"
    )


def create_employee_summary(employee: EmployeeRecord) -> str:
    """Render one employee record as the searchable summary text."""
    address = employee.address
    contact = employee.contact_details
    job = employee.job_details

    basic_info = (
        f"Employee ID: {employee.employee_id}\n"
        f"Name: {employee.first_name} {employee.last_name}\n"
        f"Date of birth: {format_date(employee.date_of_birth)}\n"
        f"Address: {address.street}, {address.city}, {address.state}, "
        f"{address.postal_code}, {address.country}\n"
        f"Email: {contact.email}\n"
        f"Phone number: {contact.phone_number}"
    )
    job_details = (
        f"{job.job_title} in the {job.department} department. "
        f"The hire date is {format_date(job.hire_date)}. "
        f"The salary is {format_number(job.salary)} {job.currency}."
    )
    skills = ", ".join(employee.skills)
    performance_review = "\n\n".join(_format_review(r) for r in employee.performance_review)
    work_location = (
        f"Nearest office: {employee.work_location.nearest_office}\n"
        f"Remote: {str(employee.work_location.is_remote).lower()}"
    )
    benefits = (
        f"Health insurance: {employee.benefits.health_insurance}\n"
        f"Retirement plan: {employee.benefits.retirement_plan}\n"
        f"Paid time off: {employee.benefits.paid_time_off}"
    )
    emergency_contact = (
        f"Name: {employee.emergency_contact.name}\n"
        f"Relationship: {employee.emergency_contact.relationship}\n"
        f"Phone number: {employee.emergency_contact.phone_number}"
    )

    return (
        f"{basic_info}\n\n"
        f"{job_details}\n\n"
        f"Skills: {skills}\n\n"
        f"Performance review:\n{performance_review}\n\n"
        f"Work location:\n{work_location}\n\n"
        f"Benefits:\n{benefits}\n\n"
        f"Emergency contact:\n{emergency_contact}\n\n"
        f"Notes:\n{employee.notes}"
    )
