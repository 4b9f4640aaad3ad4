"""Tests for form masters and class arms."""

from app.models.form_master import FormMaster


def _create_form_master(client, headers, email="iorfa@school.com"):
    response = client.post(
        "/api/formmasters",
        json={"name": "Mrs. Iorfa", "email": email, "password": "secret123"},
        headers=headers,
    )
    assert response.status_code == 200
    return response.json()


def _arm_ids(client, headers, *names):
    arms = {a["name"]: a for a in client.get("/api/arms", headers=headers).json()}
    return [arms[name]["id"] for name in names]


class TestFormMasters:
    def test_create_and_list(self, client, admin_headers):
        created = _create_form_master(client, admin_headers)

        assert created["name"] == "Mrs. Iorfa"
        assert created["email"] == "iorfa@school.com"
        assert created["message"] == "Form master created successfully"
        assert "password" not in created and "password_hash" not in created

        listed = client.get("/api/formmasters", headers=admin_headers).json()
        assert listed == [{"id": created["id"], "name": "Mrs. Iorfa", "email": "iorfa@school.com"}]

    def test_password_is_hashed(self, client, admin_headers):
        created = _create_form_master(client, admin_headers)

        async def _stored_hash():
            async with client.app.state.sessionmaker() as session:
                return (await session.get(FormMaster, created["id"])).password_hash

        stored = client.portal.call(_stored_hash)
        assert stored != "secret123"
        assert stored.startswith("$pbkdf2-sha256$")

    def test_duplicate_email_rejected(self, client, admin_headers):
        _create_form_master(client, admin_headers)
        response = client.post(
            "/api/formmasters",
            json={"name": "Mr. Other", "email": "iorfa@school.com", "password": "x"},
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert response.json() == {"error": "Failed to create form master"}

    def test_admin_only(self, client, form_master_headers):
        response = client.get("/api/formmasters", headers=form_master_headers)

        assert response.status_code == 403
        assert response.json() == {"error": "Admin access required"}

    def test_delete_clears_class_arm_references(self, seeded_client, admin_headers, count_rows):
        form_master = _create_form_master(seeded_client, admin_headers)
        arm_a, arm_b = _arm_ids(seeded_client, admin_headers, "JSS1A", "JSS2B")
        for arm_id in (arm_a, arm_b):
            response = seeded_client.put(
                f"/api/arms/{arm_id}/assign", json={"formMasterId": form_master["id"]}, headers=admin_headers
            )
            assert response.status_code == 200

        response = seeded_client.delete(f"/api/formmasters/{form_master['id']}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Form master deleted successfully"}
        assert count_rows(seeded_client, FormMaster) == 0
        arms = {a["id"]: a for a in seeded_client.get("/api/arms", headers=admin_headers).json()}
        for arm_id in (arm_a, arm_b):
            assert arms[arm_id]["form_master_id"] is None
            assert arms[arm_id]["form_master_name"] is None

    def test_delete_unknown_id_succeeds(self, client, admin_headers):
        response = client.delete("/api/formmasters/999", headers=admin_headers)

        assert response.status_code == 200


class TestClassArms:
    def test_list_seeded_arms(self, seeded_client, form_master_headers):
        arms = seeded_client.get("/api/arms", headers=form_master_headers).json()

        assert len(arms) == 30
        assert arms[0]["name"] == "JSS1A"
        assert arms[-1]["name"] == "SS3E"
        assert arms[0]["student_names"] == [""] * 50
        assert arms[0]["form_master_id"] is None

    def test_assign_includes_form_master_details(self, seeded_client, admin_headers):
        form_master = _create_form_master(seeded_client, admin_headers)
        (arm_id,) = _arm_ids(seeded_client, admin_headers, "SS1C")

        seeded_client.put(f"/api/arms/{arm_id}/assign", json={"formMasterId": form_master["id"]}, headers=admin_headers)

        arm = next(a for a in seeded_client.get("/api/arms", headers=admin_headers).json() if a["id"] == arm_id)
        assert arm["form_master_id"] == form_master["id"]
        assert arm["form_master_name"] == "Mrs. Iorfa"
        assert arm["form_master_email"] == "iorfa@school.com"

    def test_unassign_with_null(self, seeded_client, admin_headers):
        form_master = _create_form_master(seeded_client, admin_headers)
        (arm_id,) = _arm_ids(seeded_client, admin_headers, "JSS3D")
        seeded_client.put(f"/api/arms/{arm_id}/assign", json={"formMasterId": form_master["id"]}, headers=admin_headers)

        response = seeded_client.put(f"/api/arms/{arm_id}/assign", json={"formMasterId": None}, headers=admin_headers)

        assert response.status_code == 200
        arm = next(a for a in seeded_client.get("/api/arms", headers=admin_headers).json() if a["id"] == arm_id)
        assert arm["form_master_id"] is None

    def test_replace_roster(self, seeded_client, form_master_headers):
        (arm_id,) = _arm_ids(seeded_client, form_master_headers, "JSS2A")
        names = ["Aondona Terver", "Mnena Ushahemba", ""]

        response = seeded_client.put(
            f"/api/arms/{arm_id}/students", json={"studentNames": names}, headers=form_master_headers
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Student names updated successfully"}
        arm = next(a for a in seeded_client.get("/api/arms", headers=form_master_headers).json() if a["id"] == arm_id)
        assert arm["student_names"] == names

    def test_requires_token(self, client):
        assert client.get("/api/arms").status_code == 401
