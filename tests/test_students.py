import pytest

STUDENTS = "/api/v1/students"


@pytest.fixture
def student_data():
    return {
        "first_name": "An",
        "last_name": "Nguyen",
        "email": "an.nguyen@example.com",
        "phone": "+84901234567",
        "date_of_birth": "2005-03-14",
    }


def test_create_student(client, student_data):
    response = client.post(STUDENTS, json=student_data)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Student saved successfully."
    assert body["data"]["id"] is not None
    for key, value in student_data.items():
        assert body["data"][key] == value


def test_read_after_create(client, create_student, student_data):
    student = create_student(**student_data)

    response = client.get(f"{STUDENTS}/{student['id']}")

    assert response.status_code == 200
    assert response.json()["data"] == student
    assert response.json()["message"] == "Student retrieved successfully."


def test_list_students(client, create_student):
    for i in range(1, 6):
        create_student(first_name=f"Student {i}", last_name="Tran")

    response = client.get(STUDENTS, params={"skip": 2, "limit": 3})

    body = response.json()
    assert body["message"] == "Students retrieved successfully."
    assert [s["first_name"] for s in body["data"]] == ["Student 3", "Student 4", "Student 5"]


def test_update_keeps_other_fields(client, create_student, student_data):
    student = create_student(**student_data)

    response = client.put(f"{STUDENTS}/{student['id']}", json={"phone": "+84987654321"})

    data = response.json()["data"]
    assert data["phone"] == "+84987654321"
    assert data["email"] == student_data["email"]
    assert data["date_of_birth"] == student_data["date_of_birth"]
    assert response.json()["message"] == "Student updated successfully."


def test_patch_updates_only_supplied_fields(client, create_student, student_data):
    student = create_student(**student_data)

    response = client.patch(f"{STUDENTS}/{student['id']}", json={"last_name": "Pham"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["last_name"] == "Pham"
    assert data["first_name"] == student_data["first_name"]
    assert data["email"] == student_data["email"]


def test_vietnamese_messages(client, create_student):
    student = create_student(first_name="An", last_name="Nguyen")
    headers = {"Accept-Language": "vi"}

    assert client.get(STUDENTS, headers=headers).json()["message"] == "Lấy danh sách học viên thành công."
    response = client.delete(f"{STUDENTS}/{student['id']}", headers=headers)
    assert response.json()["message"] == "Xóa học viên thành công."
    assert client.get(f"{STUDENTS}/{student['id']}", headers=headers).json() == {
        "success": False,
        "message": "Không tìm thấy học viên",
    }


def test_delete_then_read(client, create_student):
    student = create_student(first_name="Binh", last_name="Le")

    response = client.delete(f"{STUDENTS}/{student['id']}")
    assert response.json()["data"] == student["id"]
    assert response.json()["message"] == "Student deleted successfully."

    response = client.get(f"{STUDENTS}/{student['id']}")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Student not found"}


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_missing_student(client, method):
    kwargs = {"json": {"first_name": "Ghost"}} if method == "put" else {}

    response = getattr(client, method)(f"{STUDENTS}/404", **kwargs)

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Student not found"}
    assert client.get(STUDENTS).json()["data"] == []


def test_required_names(client):
    response = client.post(STUDENTS, json={"first_name": "An"})

    assert response.status_code == 422
    assert [error["loc"] for error in response.json()["data"]] == [["body", "last_name"]]


def test_invalid_date_of_birth(client):
    response = client.post(STUDENTS, json={"first_name": "An", "last_name": "Nguyen", "date_of_birth": "not-a-date"})

    assert response.status_code == 422


def test_duplicate_email(client, create_student, student_data):
    create_student(**student_data)

    response = client.post(STUDENTS, json={**student_data, "first_name": "Other"})

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_rooms_and_students_are_independent(client, create_student):
    student = create_student(first_name="An", last_name="Nguyen")

    assert client.get(f"/api/v1/rooms/{student['id']}").status_code == 404
    assert client.get("/api/v1/rooms").json()["data"] == []


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/v1/courses")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
