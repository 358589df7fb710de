from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cafeterias.mysql_cafeteria_repository import MySQLCafeteriaRepository
from .cafeterias.repository import CafeteriaRepository
from .cafeterias.service import CafeteriaService
from .companies.mysql_company_repository import MySQLCompanyRepository
from .companies.repository import CompanyRepository
from .companies.service import CompanyService
from .consumption.mysql_consumption_repository import MySQLConsumptionRepository
from .consumption.repository import ConsumptionRepository
from .consumption.service import ConsumptionRegistrar, WeeklyLedger
from .core.constants import DEFAULT_EVENT_QUEUE_SIZE, INACTIVITY_THRESHOLD_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .employees.inactivity import InactivityService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.mysql_type_repository import MySQLEmployeeTypeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService, EmployeeTypeService
from .employees.type_repository import EmployeeTypeRepository
from .events.broker import ConsumptionEventBroker
from .health.service import HealthService
from .history.mysql_history_repository import MySQLHistoryRepository
from .history.repository import HistoryRepository
from .history.service import HistoryArchiver
from .tablets.mysql_tablet_repository import MySQLTabletRepository
from .tablets.repository import TabletRepository
from .tablets.service import TabletService


@dataclass(frozen=True)
class Container:
    companies_repo: CompanyRepository
    cafeterias_repo: CafeteriaRepository
    employees_repo: EmployeeRepository
    employee_types_repo: EmployeeTypeRepository
    consumption_repo: ConsumptionRepository
    history_repo: HistoryRepository
    tablets_repo: TabletRepository

    event_broker: ConsumptionEventBroker

    company_service: CompanyService
    cafeteria_service: CafeteriaService
    employee_service: EmployeeService
    employee_type_service: EmployeeTypeService
    inactivity_service: InactivityService
    consumption_registrar: ConsumptionRegistrar
    weekly_ledger: WeeklyLedger
    history_archiver: HistoryArchiver
    tablet_service: TabletService
    health_service: Optional[HealthService] = None


def assemble(
    *,
    companies_repo: CompanyRepository,
    cafeterias_repo: CafeteriaRepository,
    employees_repo: EmployeeRepository,
    employee_types_repo: EmployeeTypeRepository,
    consumption_repo: ConsumptionRepository,
    history_repo: HistoryRepository,
    tablets_repo: TabletRepository,
    health_service: Optional[HealthService] = None,
    inactivity_threshold_days: int = INACTIVITY_THRESHOLD_DAYS,
    event_queue_size: int = DEFAULT_EVENT_QUEUE_SIZE,
) -> Container:
    """Wire services over any set of repositories (MySQL in production, fakes in tests)."""
    broker = ConsumptionEventBroker(queue_size=event_queue_size)

    return Container(
        companies_repo=companies_repo,
        cafeterias_repo=cafeterias_repo,
        employees_repo=employees_repo,
        employee_types_repo=employee_types_repo,
        consumption_repo=consumption_repo,
        history_repo=history_repo,
        tablets_repo=tablets_repo,
        event_broker=broker,
        company_service=CompanyService(companies_repo),
        cafeteria_service=CafeteriaService(cafeterias_repo, companies_repo),
        employee_service=EmployeeService(employees_repo, cafeterias_repo),
        employee_type_service=EmployeeTypeService(employee_types_repo),
        inactivity_service=InactivityService(employees_repo, threshold_days=inactivity_threshold_days),
        consumption_registrar=ConsumptionRegistrar(
            consumption_repo, employees_repo, history=history_repo, broker=broker
        ),
        weekly_ledger=WeeklyLedger(consumption_repo, cafeterias_repo),
        history_archiver=HistoryArchiver(history_repo, cafeterias_repo),
        tablet_service=TabletService(tablets_repo, cafeterias_repo),
        health_service=health_service,
    )


def build_container(
    *,
    db_config: dict,
    inactivity_threshold_days: int = INACTIVITY_THRESHOLD_DAYS,
    event_queue_size: int = DEFAULT_EVENT_QUEUE_SIZE,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return assemble(
        companies_repo=MySQLCompanyRepository(conn),
        cafeterias_repo=MySQLCafeteriaRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        employee_types_repo=MySQLEmployeeTypeRepository(conn),
        consumption_repo=MySQLConsumptionRepository(conn),
        history_repo=MySQLHistoryRepository(conn),
        tablets_repo=MySQLTabletRepository(conn),
        health_service=HealthService(conn),
        inactivity_threshold_days=inactivity_threshold_days,
        event_queue_size=event_queue_size,
    )
