"""Default smoke suite: gateway routes forwarded to the backend REST controllers.

    client -> Gateway routes (GATEWAY_BASE) -> Backend controllers (BACKEND_BASE)
"""

from typing import Tuple

from gatewaycheck.core.models import TestCase
from gatewaycheck.parsers.suite import join_url

GATEWAY_BASE = "http://localhost:8082/tymg"
BACKEND_BASE = "http://localhost:8080/tymb"


def default_suite(base: str = GATEWAY_BASE) -> Tuple[TestCase, ...]:
    def url(path: str) -> str:
        return join_url(base, path)

    return (
        # ── People ──────────────────────────────────────────────
        TestCase(
            name="People - Get All",
            method="POST",
            url=url("/people/get-all"),
            expected_status=frozenset({200, 202}),
            description="Gateway Route → Backend PeopleController.getAllPeople()",
        ),
        TestCase(
            name="People - Insert",
            method="POST",
            url=url("/people/insert"),
            body={
                "name": "TestCharacter",
                "description": "Test",
                "bonus": 10,
                "ability": "Test Ability",
            },
            expected_status=frozenset({201, 400}),
            description="Gateway Route → Backend PeopleController.insertPeople()",
        ),

        # ── Weapons ─────────────────────────────────────────────
        TestCase(
            name="Weapons - Get All",
            method="GET",
            url=url("/weapons"),
            expected_status=frozenset({200}),
            description="Gateway Route → Backend WeaponController.getAllWeapons()",
        ),

        # ── Gallery / Blackjack: no credentials are sent, so 401 ─
        TestCase(
            name="Gallery - Get All",
            method="POST",
            url=url("/gallery/getAll"),
            expected_status=frozenset({401}),
            description="Gateway Route → Backend GalleryController.getAllImages()",
        ),
        TestCase(
            name="Blackjack - Status",
            method="GET",
            url=url("/deckofcards/blackjack/status"),
            expected_status=frozenset({401}),
            description="Gateway Route → Backend BlackjackController.getStatus()",
        ),

        # ── Damage calculation / names ──────────────────────────
        TestCase(
            name="People - Damage Calculation",
            method="GET",
            url=url("/people/damageWithWeapon?name=TestCharacter"),
            expected_status=frozenset({200, 400}),
            description="Gateway Route → Backend WeaponDamageController.calculateDamageWithWeapon()",
        ),
        TestCase(
            name="People - Get Names",
            method="GET",
            url=url("/people/names"),
            expected_status=frozenset({200}),
            description="Gateway Route → Backend PeopleController.getNames()",
        ),

        # ── Infrastructure ──────────────────────────────────────
        TestCase(
            name="Health Consumer Check",
            method="GET",
            url=url("/health/consumer"),
            expected_status=frozenset({200, 500}),
            description="Gateway Route → Backend HealthConsumerController",
        ),
    )
