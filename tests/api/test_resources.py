"""API resource tests."""

from tests.api.conftest import as_actor
from tests.conftest import APP_USER, VIEWER

FORM_BASE = "/v1/projects/1/forms/alpha"


class TestHealth:
    def test_health(self, client) -> None:
        r = client.simulate_get("/v1/health")
        assert r.status_code == 200
        assert r.json["status"] == "ok"

    def test_ready(self, client) -> None:
        r = client.simulate_get("/v1/health/ready")
        assert r.status_code == 200
        assert r.json["status"] == "ready"


class TestRoles:
    def test_list_roles(self, client) -> None:
        r = client.simulate_get("/v1/roles")
        assert r.status_code == 200
        assert "app-user" in [role["system"] for role in r.json]

    def test_get_role_by_name(self, client) -> None:
        r = client.simulate_get("/v1/roles/app-user")
        assert r.status_code == 200
        assert r.json["id"] == APP_USER.id
        assert r.json["verbs"] == list(APP_USER.verbs)

    def test_get_role_by_id(self, client) -> None:
        r = client.simulate_get(f"/v1/roles/{VIEWER.id}")
        assert r.status_code == 200
        assert r.json["system"] == "viewer"

    def test_get_role_mixed_case_not_found(self, client) -> None:
        r = client.simulate_get("/v1/roles/App-User")
        assert r.status_code == 404
        assert "Role" in r.json["error"]


class TestListAssignments:
    def test_unauthenticated(self, client) -> None:
        r = client.simulate_get("/v1/projects/1/assignments")
        assert r.status_code == 401

    def test_project_assignments(self, client) -> None:
        r = client.simulate_get("/v1/projects/1/assignments", headers=as_actor("manager"))
        assert r.status_code == 200
        assert {"actorId": "viewer", "roleId": VIEWER.id} in r.json

    def test_extended_header(self, client) -> None:
        headers = {**as_actor("manager"), "X-Extended-Metadata": "true"}
        r = client.simulate_get("/v1/projects/1/assignments", headers=headers)
        assert r.status_code == 200
        assert {a["actor"]["id"] for a in r.json} >= {"manager", "viewer"}

    def test_root_assignments(self, client) -> None:
        r = client.simulate_get("/v1/assignments", headers=as_actor("root-admin"))
        assert r.status_code == 200
        assert r.json == [{"actorId": "root-admin", "roleId": 1}]

    def test_denied(self, client) -> None:
        r = client.simulate_get("/v1/projects/1/assignments", headers=as_actor("viewer"))
        assert r.status_code == 403

    def test_missing_project(self, client) -> None:
        r = client.simulate_get("/v1/projects/9/assignments", headers=as_actor("manager"))
        assert r.status_code == 404

    def test_invalid_project_id(self, client) -> None:
        r = client.simulate_get("/v1/projects/abc/assignments", headers=as_actor("manager"))
        assert r.status_code == 400

    def test_noncanonical_project_id_in_form_summary(self, client) -> None:
        r = client.simulate_get(
            "/v1/projects/+1/assignments/forms", headers=as_actor("manager")
        )
        assert r.status_code == 400


class TestGrantRevoke:
    def test_grant_list_revoke_flow(self, client, db) -> None:
        headers = as_actor("manager")

        r = client.simulate_post(f"{FORM_BASE}/assignments/app-user/target", headers=headers)
        assert r.status_code == 200
        assert r.json == {"success": True}

        r = client.simulate_get(f"{FORM_BASE}/assignments/app-user", headers=headers)
        assert r.status_code == 200
        assert [a["id"] for a in r.json] == ["target"]

        r = client.simulate_delete(f"{FORM_BASE}/assignments/app-user/target", headers=headers)
        assert r.status_code == 200

        r = client.simulate_delete(f"{FORM_BASE}/assignments/app-user/target", headers=headers)
        assert r.status_code == 404

        assert [rec.action for rec in db.audits] == [
            "assignment.create",
            "assignment.delete",
            "assignment.delete",
        ]

    def test_grant_by_numeric_role(self, client, db) -> None:
        r = client.simulate_post(
            f"{FORM_BASE}/assignments/{APP_USER.id}/target", headers=as_actor("manager")
        )
        assert r.status_code == 200
        assert ("target", APP_USER.id, "form-1-alpha") in db.assignments

    def test_grant_escalation_rejected(self, client, db) -> None:
        before = list(db.assignments)
        r = client.simulate_post(
            "/v1/projects/1/assignments/admin/target", headers=as_actor("manager")
        )
        assert r.status_code == 403
        assert db.assignments == before

    def test_grant_unknown_actor(self, client) -> None:
        r = client.simulate_post(
            f"{FORM_BASE}/assignments/viewer/ghost", headers=as_actor("manager")
        )
        assert r.status_code == 404

    def test_grant_audit_failure_is_500(self, client, db) -> None:
        db.fail_audit = True
        before = list(db.assignments)
        r = client.simulate_post(
            f"{FORM_BASE}/assignments/viewer/target", headers=as_actor("manager")
        )
        assert r.status_code == 500
        assert db.assignments == before


class TestFormAssignments:
    def test_summary(self, client, db) -> None:
        db.assign("target", VIEWER, "form-1-alpha")
        r = client.simulate_get("/v1/projects/1/assignments/forms", headers=as_actor("manager"))
        assert r.status_code == 200
        assert [a["id"] for a in r.json["alpha"][str(VIEWER.id)]] == ["target"]
        assert r.json["beta"] == {}

    def test_summary_by_role(self, client, db) -> None:
        db.assign("target", VIEWER, "form-1-beta")
        r = client.simulate_get(
            "/v1/projects/1/assignments/forms/viewer", headers=as_actor("manager")
        )
        assert r.status_code == 200
        assert r.json["alpha"] == []
        assert [a["id"] for a in r.json["beta"]] == ["target"]

    def test_summary_denied(self, client) -> None:
        r = client.simulate_get("/v1/projects/1/assignments/forms", headers=as_actor("viewer"))
        assert r.status_code == 403


class TestAudits:
    def test_audits_require_root_audit_read(self, client) -> None:
        r = client.simulate_get("/v1/audits", headers=as_actor("manager"))
        assert r.status_code == 403

    def test_audits_after_grant(self, client) -> None:
        client.simulate_post(f"{FORM_BASE}/assignments/viewer/target", headers=as_actor("manager"))
        r = client.simulate_get(
            "/v1/audits?action=assignment.create", headers=as_actor("root-admin")
        )
        assert r.status_code == 200
        assert len(r.json) == 1
        assert r.json[0]["actedActorId"] == "target"
        assert r.json[0]["details"]["grantedActeeId"] == "form-1-alpha"
