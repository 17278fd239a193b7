"""Template Assignment & Default — copy-on-assign and the single-default rule.

Invariants:
    - Assigning a template of N tasks creates exactly N new incomplete tasks
    - The template and its task definitions are unchanged by assignment
    - Setting a default unsets every previously default template
    - New employees receive the default template's tasks automatically
"""

from uuid import uuid4

from onboarding.services import templates as template_service


async def _template_payload(client, template_id):
    return (await client.get(f"/api/v1/templates/{template_id}")).json()


async def test_assign_creates_one_task_per_template_task(
    client, seed_template, seed_employee,
):
    res = await client.post(
        f"/api/v1/templates/{seed_template.id}/assign",
        json={"employee_id": str(seed_employee.id)},
    )
    assert res.status_code == 201
    assert res.json() == {
        "template_id": str(seed_template.id),
        "employee_id": str(seed_employee.id),
        "count": 3,
    }

    employee = (await client.get(f"/api/v1/employees/{seed_employee.id}")).json()
    assert len(employee["tasks"]) == 2 + 3
    copied = [t for t in employee["tasks"] if t["title"] in {
        "Set up development environment",
        "Complete security training",
        "Review design system",
    }]
    assert len(copied) == 3
    assert all(t["is_complete"] is False for t in copied)
    setup = next(t for t in copied if t["title"] == "Set up development environment")
    assert setup["description"] == "Install necessary software and tools"


async def test_assign_leaves_template_unchanged(client, seed_template, seed_employee):
    before = await _template_payload(client, seed_template.id)
    await client.post(
        f"/api/v1/templates/{seed_template.id}/assign",
        json={"employee_id": str(seed_employee.id)},
    )
    after = await _template_payload(client, seed_template.id)
    assert after["tasks"] == before["tasks"]
    assert after["updated_at"] == before["updated_at"]


async def test_assign_twice_copies_twice(client, seed_template, seed_employee):
    for _ in range(2):
        await client.post(
            f"/api/v1/templates/{seed_template.id}/assign",
            json={"employee_id": str(seed_employee.id)},
        )
    employee = (await client.get(f"/api/v1/employees/{seed_employee.id}")).json()
    assert len(employee["tasks"]) == 2 + 6


async def test_assign_empty_template_creates_nothing(client, seed_employee):
    template = (await client.post("/api/v1/templates", json={"name": "Empty"})).json()
    res = await client.post(
        f"/api/v1/templates/{template['id']}/assign",
        json={"employee_id": str(seed_employee.id)},
    )
    assert res.status_code == 201
    assert res.json()["count"] == 0


async def test_assign_requires_employee_id(client, seed_template):
    res = await client.post(f"/api/v1/templates/{seed_template.id}/assign", json={})
    assert res.status_code == 400


async def test_assign_unknown_template_returns_404(client, seed_employee):
    res = await client.post(
        f"/api/v1/templates/{uuid4()}/assign",
        json={"employee_id": str(seed_employee.id)},
    )
    assert res.status_code == 404


async def test_assign_unknown_employee_returns_404(client, seed_template):
    res = await client.post(
        f"/api/v1/templates/{seed_template.id}/assign",
        json={"employee_id": str(uuid4())},
    )
    assert res.status_code == 404
    assert "Employee" in res.json()["error"]["message"]


async def test_set_default_flags_template(client, seed_template):
    res = await client.post(f"/api/v1/templates/{seed_template.id}/set-default")
    assert res.status_code == 200
    assert res.json()["is_default"] is True


async def test_set_default_unsets_previous_defaults(client, seed_template):
    other = (await client.post("/api/v1/templates", json={"name": "Sales"})).json()

    await client.post(f"/api/v1/templates/{seed_template.id}/set-default")
    await client.post(f"/api/v1/templates/{other['id']}/set-default")

    templates = (await client.get("/api/v1/templates")).json()
    defaults = [t["id"] for t in templates if t["is_default"]]
    assert defaults == [other["id"]]


async def test_set_default_is_idempotent(client, seed_template):
    await client.post(f"/api/v1/templates/{seed_template.id}/set-default")
    res = await client.post(f"/api/v1/templates/{seed_template.id}/set-default")
    assert res.json()["is_default"] is True
    templates = (await client.get("/api/v1/templates")).json()
    assert sum(t["is_default"] for t in templates) == 1


async def test_set_default_unknown_template_returns_404(client):
    res = await client.post(f"/api/v1/templates/{uuid4()}/set-default")
    assert res.status_code == 404


async def test_new_employee_gets_default_template_tasks(client, seed_template):
    await client.post(f"/api/v1/templates/{seed_template.id}/set-default")

    res = await client.post(
        "/api/v1/employees",
        json={"name": "Jane Smith", "email": "jane.smith@company.com"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["auto_assigned"] == {
        "template": "Engineering Onboarding",
        "tasks_created": 3,
    }

    employee = (await client.get(f"/api/v1/employees/{body['employee']['id']}")).json()
    assert len(employee["tasks"]) == 3
    assert all(t["is_complete"] is False for t in employee["tasks"])


async def test_new_employee_without_default_gets_no_tasks(client, seed_template):
    res = await client.post(
        "/api/v1/employees", json={"name": "Jane", "email": "jane@company.com"},
    )
    assert res.json()["auto_assigned"] is None
    employee = (await client.get(f"/api/v1/employees/{res.json()['employee']['id']}")).json()
    assert employee["tasks"] == []


async def test_auto_assign_service_returns_none_without_default(test_db, seed_employee):
    result = await template_service.auto_assign_default_template(
        test_db, seed_employee.id,
    )
    assert result is None


async def test_auto_assign_service_copies_default(test_db, seed_employee, seed_template):
    await template_service.set_default_template(test_db, seed_template.id)
    result = await template_service.auto_assign_default_template(
        test_db, seed_employee.id,
    )
    assert result.template_name == "Engineering Onboarding"
    assert result.tasks_created == 3


async def test_get_default_template(test_db, seed_template):
    assert await template_service.get_default_template(test_db) is None
    await template_service.set_default_template(test_db, seed_template.id)
    default = await template_service.get_default_template(test_db)
    assert default.id == seed_template.id
