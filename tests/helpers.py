import base64

from tests.constants import URLs


def auth_headers(client, email: str = "a@b.com", password: str = "pw1") -> dict[str, str]:
    """Register (if needed) and connect, returning the X-Token header."""
    client.post(URLs.USERS, json={"email": email, "password": password})
    response = client.get(URLs.CONNECT, auth=(email, password))
    return {"X-Token": response.json()["token"]}


def b64(content: bytes) -> str:
    return base64.b64encode(content).decode()
