import pytest

from src.shop_management.shop_management.core.enums import PaymentMethod
from src.shop_management.shop_management.core.exceptions import NotFoundError, ValidationError
from src.shop_management.shop_management.employees.service import EmployeeService


def _form(**overrides):
    form = {
        "name": "Abebe Kebede",
        "phone": "0911223344",
        "position": "Carpenter",
        "paymentMethod": "Weekly",
        "accountNumber": "1000123456",
        "dailyRate": "160",
    }
    form.update(overrides)
    return form


@pytest.fixture
def service(employees_repo):
    return EmployeeService(employees_repo, id_factory=lambda: "emp001")


def test_create_employee(service, employees_repo):
    employee = service.create_employee(_form())

    assert employee.employee_id == "emp001"
    assert employee.payment_method == PaymentMethod.WEEKLY
    assert employee.daily_rate == 160.0
    assert employee.monthly_rate is None
    assert employees_repo.get_by_id("emp001") == employee


def test_blank_rate_means_not_set(service):
    employee = service.create_employee(_form(dailyRate="", hourlyRate="  "))
    assert employee.daily_rate is None
    assert employee.hourly_rate is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "A"},
        {"phone": "0911"},
        {"accountNumber": "123"},
        {"paymentMethod": "Daily"},
        {"dailyRate": "-5"},
        {"monthlyRate": "a lot"},
        {"dailyRate": "inf"},
        {"hourlyRate": "nan"},
    ],
)
def test_invalid_forms_rejected(service, overrides):
    with pytest.raises(ValidationError):
        service.create_employee(_form(**overrides))


def test_required_field_missing(service):
    form = _form()
    del form["accountNumber"]
    with pytest.raises(ValidationError, match="accountNumber is required"):
        service.create_employee(form)


def test_update_merges_given_fields(service):
    service.create_employee(_form())

    updated = service.update_employee("emp001", {"phone": "0922334455", "paymentMethod": "Monthly"})

    assert updated.phone == "0922334455"
    assert updated.payment_method == PaymentMethod.MONTHLY
    assert updated.name == "Abebe Kebede"
    assert updated.daily_rate == 160.0


def test_unknown_employee(service):
    with pytest.raises(NotFoundError):
        service.get_employee("nope")
    with pytest.raises(NotFoundError):
        service.update_employee("nope", {"name": "Someone"})
    with pytest.raises(NotFoundError):
        service.delete_employee("nope")


def test_delete_employee(service, employees_repo):
    service.create_employee(_form())
    service.delete_employee("emp001")
    assert employees_repo.list_all() == []
