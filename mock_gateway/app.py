"""MockGateway: local stand-in for the gateway/backend pair.

Serves the routes the default smoke suite calls, under the same /tymg
prefix, with in-memory data, so the checker can be run without the real
services:

    python -m mock_gateway.app
    python -m gatewaycheck.main --gateway http://127.0.0.1:8082/tymg --delay 0

Gallery and Blackjack reject calls that carry no bearer token, like the
real gateway's security filter.
"""

from flask import Blueprint, Flask, current_app, jsonify, request

PREFIX = "/tymg"

_PEOPLE = [
    {"name": "Arthas", "physicPower": 80, "magicPower": 40, "utilityPower": 20,
     "faction": "Alliance", "bonus": 5},
    {"name": "Jaina", "physicPower": 20, "magicPower": 95, "utilityPower": 40,
     "faction": "Alliance", "bonus": 8},
]

_WEAPONS = [
    {"name": "Frostmourne", "owner": "Arthas", "baseDamage": 120, "bonusDamage": 30},
    {"name": "Staff of Kirin Tor", "owner": "Jaina", "baseDamage": 60, "bonusDamage": 45},
]

gateway = Blueprint("gateway", __name__)


def _people():
    return current_app.config["PEOPLE"]


def _authorized() -> bool:
    return request.headers.get("Authorization", "").startswith("Bearer ")


def _unauthorized():
    return jsonify(error="Unauthorized", message="Bearer token required"), 401


# ══════════════════════════════════════════════════════════════════
#  People
# ══════════════════════════════════════════════════════════════════

@gateway.route("/people/get-all", methods=["POST"])
def people_get_all():
    return jsonify(_people())


@gateway.route("/people/insert", methods=["POST"])
def people_insert():
    payload = request.get_json(silent=True) or {}
    name = payload.get("name")
    if not name:
        return jsonify(error="Bad Request", message="name is required"), 400
    if any(p["name"] == name for p in _people()):
        return jsonify(error="Bad Request", message=f"{name} already exists"), 400

    person = {
        "name": name,
        "description": payload.get("description", ""),
        "bonus": int(payload.get("bonus") or 0),
        "ability": payload.get("ability", ""),
        "physicPower": 0, "magicPower": 0, "utilityPower": 0,
        "faction": "",
    }
    _people().append(person)
    return jsonify(person), 201


@gateway.route("/people/names", methods=["GET"])
def people_names():
    return jsonify([p["name"] for p in _people()])


@gateway.route("/people/damageWithWeapon", methods=["GET"])
def people_damage_with_weapon():
    name = request.args.get("name", "")
    person = next((p for p in _people() if p["name"] == name), None)
    if person is None:
        return jsonify(error="Bad Request", message=f"Unknown character: {name!r}"), 400

    weapons = [w for w in _WEAPONS if w["owner"] == name]
    damage = person.get("bonus", 0) + sum(w["baseDamage"] + w["bonusDamage"] for w in weapons)
    return jsonify(name=name, weapons=[w["name"] for w in weapons], damage=damage)


# ══════════════════════════════════════════════════════════════════
#  Weapons
# ══════════════════════════════════════════════════════════════════

@gateway.route("/weapons", methods=["GET"])
def weapons():
    return jsonify(_WEAPONS)


# ══════════════════════════════════════════════════════════════════
#  Gallery / Deckofcards (authenticated routes)
# ══════════════════════════════════════════════════════════════════

@gateway.route("/gallery/getAll", methods=["POST"])
def gallery_get_all():
    if not _authorized():
        return _unauthorized()
    return jsonify([])


@gateway.route("/deckofcards/blackjack/status", methods=["GET"])
def blackjack_status():
    if not _authorized():
        return _unauthorized()
    return jsonify(status="NO_GAME")


# ══════════════════════════════════════════════════════════════════
#  Infrastructure
# ══════════════════════════════════════════════════════════════════

@gateway.route("/health/consumer", methods=["GET"])
def health_consumer():
    if not current_app.config["CONSUMER_UP"]:
        return jsonify(status="DOWN", consumer="stopped"), 500
    return jsonify(status="UP", consumer="running")


@gateway.route("/fallback", methods=["GET", "POST"])
def fallback():
    return jsonify(code=503, message="Service temporarily unavailable"), 503


def create_app(consumer_up: bool = True) -> Flask:
    """Fresh app with its own copy of the in-memory people list."""
    app = Flask(__name__)
    app.config["PEOPLE"] = [dict(p) for p in _PEOPLE]
    app.config["CONSUMER_UP"] = consumer_up
    app.register_blueprint(gateway, url_prefix=PREFIX)
    return app


app = create_app()


if __name__ == "__main__":
    print(f"\n  MockGateway starting on http://0.0.0.0:8082{PREFIX}\n")
    app.run(host="0.0.0.0", port=8082, debug=True)
