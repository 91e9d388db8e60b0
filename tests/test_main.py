from fastapi.testclient import TestClient


def test_root_and_router_are_mounted():
    import main

    with TestClient(main.app) as client:
        assert client.get("/").json()["message"] == "Sorteio Insta is running"
        assert client.get("/api/giveaway").status_code == 200
