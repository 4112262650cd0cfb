import json

from app.routers.responses import send_error, send_response


def test_send_response_envelope():
    assert send_response([1, 2], "Rooms retrieved successfully.") == {
        "success": True,
        "data": [1, 2],
        "message": "Rooms retrieved successfully.",
    }


def test_send_error_defaults_to_not_found_without_data():
    response = send_error("Room not found")

    assert response.status_code == 404
    assert json.loads(response.body) == {"success": False, "message": "Room not found"}


def test_send_error_keeps_falsy_data():
    response = send_error("The given data was invalid.", code=422, data=[])

    assert response.status_code == 422
    assert json.loads(response.body) == {"success": False, "message": "The given data was invalid.", "data": []}
