import copy

import pytest


SAMPLE_EMPLOYEE = {
    "employee_id": "E001",
    "first_name": "Ada",
    "last_name": "Lovelace",
    "date_of_birth": "1985-12-10",
    "address": {
        "street": "12 Analytical Way",
        "city": "London",
        "state": "Greater London",
        "postal_code": "NW1 2DB",
        "country": "United Kingdom",
    },
    "contact_details": {
        "email": "ada.lovelace@analyticalengines.co.uk",
        "phone_number": "+44 20 7946 0958",
    },
    "job_details": {
        "job_title": "Software Engineer",
        "department": "Engineering",
        "manager": "Charles Babbage",
        "hire_date": "2019-03-01",
        "salary": 85000,
        "currency": "GBP",
    },
    "work_location": {
        "nearest_office": "London HQ",
        "is_remote": False,
    },
    "reporting_manager": "Charles Babbage",
    "skills": ["Go", "SQL"],
    "performance_review": [
        {"review_date": "2024-01-01", "rating": 4, "comments": "Good"},
    ],
    "benefits": {
        "health_insurance": "Premium",
        "retirement_plan": "401k",
        "paid_time_off": "25 days",
    },
    "emergency_contact": {
        "name": "William King",
        "relationship": "Spouse",
        "phone_number": "+44 20 7946 0000",
    },
    "notes": "Leads the compiler guild.",
}


@pytest.fixture
def make_employee():
    """Factory for deep copies of the sample employee with top-level overrides."""

    def _make(**overrides):
        data = copy.deepcopy(SAMPLE_EMPLOYEE)
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def employee_data(make_employee):
    """Well-formed employee record as untyped data."""
    return make_employee()
