import os
from typing import Any, Dict

from flask import Flask, jsonify, request

from core.storage import ContactBook, full_name

app = Flask(__name__)

book = ContactBook()

STATE: Dict[str, Any] = {"seed": None, "seeded": False}

DEFAULT_SEED = os.environ.get("CONTACTS_SEED", "")
HOST = os.environ.get("CONTACTS_HOST", "127.0.0.1")
PORT = int(os.environ.get("CONTACTS_PORT", "5000"))


def ok(data=None, **extra):
    payload = {"ok": True}
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return jsonify(payload)

def err(message: str, status: int = 400, **extra):
    payload = {"ok": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status

def contact_json(name: str, comms) -> Dict[str, Any]:
    return {"name": name, "communications": {c.value: v for c, v in comms.items()}}

def warm_start(seed: str = DEFAULT_SEED):
    """Load the optional in-memory seed at startup."""
    seed = (seed or "").strip()
    STATE["seed"] = seed or None

    if not seed:
        print("[warm_start] No seed provided.")
        return

    try:
        loaded = book.load_seed(seed)
    except ValueError as e:
        print(f"[warm_start] Seed rejected: {e}")
        return
    STATE["seeded"] = True
    print(f"[warm_start] Seeded {loaded:,} contacts")


@app.get("/api/status")
def api_status():
    return ok({
        "contacts": len(book),
        "seed": STATE["seed"],
        "seeded": STATE["seeded"],
    })

@app.get("/api/contacts")
def api_contacts():
    rows = [contact_json(name, comms) for name, comms in book.contacts.items()]
    return ok({"count": len(rows), "rows": rows})

@app.get("/api/contacts/names")
def api_contact_names():
    return ok(book.contacts.key_set())

@app.get("/api/contacts/search")
def api_contact_search():
    name = full_name(request.args.get("first", ""), request.args.get("last", ""))
    if not name:
        return err("first and last required: /api/contacts/search?first=...&last=...")

    comms = book.find_contact(name)
    if comms is None:
        return err(f"No contact entry found for '{name}'", 404)
    return ok(contact_json(name, comms))

@app.get("/api/contacts/range")
def api_contact_range():
    start = request.args.get("start")
    end = request.args.get("end")
    if start is None or end is None:
        return err("start and end are required: /api/contacts/range?start=...&end=...")

    limit = request.args.get("limit", "50")
    try:
        limit = max(1, min(200, int(limit)))
    except ValueError:
        limit = 50

    names = book.contacts_in_range(start, end)[:limit]
    return ok({"count_returned": len(names), "names": names})

@app.post("/api/contacts")
def api_contact_add():
    data = request.get_json(silent=True) or {}
    name = full_name(str(data.get("first", "")), str(data.get("last", "")))
    if not name:
        return err("first and last are required")

    try:
        previous = book.add_contact(name, str(data.get("communications", "")))
    except ValueError as e:
        return err(str(e))

    return ok(contact_json(name, book.find_contact(name)), updated=previous is not None)

@app.post("/api/contacts/delete")
def api_contact_delete():
    data = request.get_json(silent=True) or {}
    name = full_name(str(data.get("first", "")), str(data.get("last", "")))
    if not name:
        return err("first and last are required")

    if not book.remove_contact(name):
        return err(f"No contact entry found for '{name}'", 404)
    return ok({"deleted": True, "name": name})


if __name__ == "__main__":
    warm_start()
    app.run(host=HOST, port=PORT, debug=True, use_reloader=False)
