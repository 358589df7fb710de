from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pytest

from src.comedor_system.comedor_system.cafeterias.model import Cafeteria
from src.comedor_system.comedor_system.companies.model import Company
from src.comedor_system.comedor_system.container import Container, assemble
from src.comedor_system.comedor_system.employees.model import Employee
from tests.fakes import (
    FakeHealth,
    InMemoryCafeterias,
    InMemoryCompanies,
    InMemoryConsumption,
    InMemoryEmployees,
    InMemoryEmployeeTypes,
    InMemoryHistory,
    InMemoryTablets,
)


@pytest.fixture
def fixed_today() -> date:
    # Wednesday of the week "2024-6-3"
    return date(2024, 6, 5)


@dataclass
class Repos:
    companies: InMemoryCompanies
    cafeterias: InMemoryCafeterias
    employees: InMemoryEmployees
    types: InMemoryEmployeeTypes
    consumption: InMemoryConsumption
    history: InMemoryHistory
    tablets: InMemoryTablets


@pytest.fixture
def repos() -> Repos:
    companies = InMemoryCompanies(Company(company_id="emp_1", name="Hospital Norte"))
    cafeterias = InMemoryCafeterias(
        Cafeteria(cafeteria_id="C", name="Comedor Central", company_id="emp_1"),
        Cafeteria(cafeteria_id="D", name="Comedor Urgencias", company_id="emp_1", require_pin=False),
    )
    employees = InMemoryEmployees(
        Employee(employee_id="E1", cafeteria_id="C", name="Ana López", number="100", type="Enfermera"),
        Employee(employee_id="E2", cafeteria_id="C", name="Bruno Díaz", number="200", type="Guardia", pin="1234"),
        Employee(employee_id="E3", cafeteria_id="D", name="Carla Ruiz", number="300"),
    )
    consumption = InMemoryConsumption(employees)
    return Repos(
        companies=companies,
        cafeterias=cafeterias,
        employees=employees,
        types=InMemoryEmployeeTypes("Guardia", "Enfermera", "Externo"),
        consumption=consumption,
        history=InMemoryHistory(consumption, employees),
        tablets=InMemoryTablets(),
    )


@pytest.fixture
def container(repos: Repos) -> Container:
    return assemble(
        companies_repo=repos.companies,
        cafeterias_repo=repos.cafeterias,
        employees_repo=repos.employees,
        employee_types_repo=repos.types,
        consumption_repo=repos.consumption,
        history_repo=repos.history,
        tablets_repo=repos.tablets,
        health_service=FakeHealth(),
        event_queue_size=10,
    )
