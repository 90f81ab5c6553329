"""
Concurrency Simulation Script

Fires many reservation requests at a running backend through one shared
ApiClient to check that concurrent calls stay independent.
Run from project root: python scripts/simulate.py --count 50

Author: Khalil_Bannouri
Version: 1.0.0
"""

import argparse
import asyncio
import random
import time
from datetime import datetime, timedelta
from typing import Any

from restaurant_client import ApiClient, ApiError, MemoryTokenStore

# Sample data for random reservations
FIRST_NAMES = ["John", "Jane", "Mike", "Sarah", "Tom", "Emma", "David", "Lisa", "Chris", "Amy"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis"]
PARTY_SIZES = [1, 2, 2, 2, 3, 4, 4, 5, 6, 8]
NOTES = [None, "Window seat", "Birthday", "High chair needed", "Quiet corner"]


def generate_reservation() -> dict[str, Any]:
    """Generate a random reservation payload for the next seven days."""
    start = datetime.now().replace(minute=0, second=0, microsecond=0)
    slot = start + timedelta(days=random.randint(0, 6), hours=random.randint(1, 8))
    return {
        "customer_name": f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}",
        "party_size": random.choice(PARTY_SIZES),
        "reservation_time": slot.isoformat(),
        "notes": random.choice(NOTES),
    }


async def book(client: ApiClient, num: int) -> dict[str, Any]:
    """Check availability, then create the reservation if the slot is free."""
    payload = generate_reservation()
    start_time = time.time()

    try:
        availability = await client.reservation.check_availability(payload)
        if isinstance(availability, dict) and availability.get("available") is False:
            outcome = "unavailable"
        else:
            await client.reservation.create(payload)
            outcome = "booked"
        return {"num": num, "success": True, "outcome": outcome,
                "time": round(time.time() - start_time, 3)}

    except ApiError as e:
        return {"num": num, "success": False, "status": e.status,
                "error": e.message[:100], "time": round(time.time() - start_time, 3)}


async def run_simulation(base_url: str, count: int, token: str | None) -> None:
    print("=" * 60)
    print("🔥 RESERVATION CONCURRENCY SIMULATION")
    print("=" * 60)
    print(f"⏰ Timestamp: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"🎯 Target: {base_url}")
    print(f"📦 Requests: {count}")
    print("=" * 60)

    started = time.time()
    async with ApiClient(base_url=base_url, token_store=MemoryTokenStore(token)) as client:
        results = await asyncio.gather(*(book(client, i + 1) for i in range(count)))
    elapsed = time.time() - started

    succeeded = [r for r in results if r["success"]]
    failed = [r for r in results if not r["success"]]
    booked = sum(1 for r in succeeded if r["outcome"] == "booked")
    network = sum(1 for r in failed if r["status"] == 0)

    print(f"\n📊 RESULTS:")
    print(f"   Booked:       {booked}")
    print(f"   Unavailable:  {len(succeeded) - booked}")
    print(f"   API errors:   {len(failed) - network}")
    print(f"   Network:      {network}")
    print(f"   Total time:   {elapsed:.2f}s")
    if results:
        avg = sum(r["time"] for r in results) / len(results)
        print(f"   Avg latency:  {avg:.3f}s")

    for r in failed[:5]:
        print(f"   ❌ #{r['num']} ({r['status']}): {r['error']}")

    print("\n" + "=" * 60)


def main() -> None:
    parser = argparse.ArgumentParser(description="Reservation concurrency simulation")
    parser.add_argument("--base-url", default="http://127.0.0.1:5000/api")
    parser.add_argument("--count", type=int, default=50)
    parser.add_argument("--token", default=None, help="Bearer token to send")
    args = parser.parse_args()

    asyncio.run(run_simulation(args.base_url, args.count, args.token))


if __name__ == "__main__":
    main()
