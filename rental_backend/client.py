"""Command-line helper that drives the rental backend the way the web front end does."""
import argparse
import json
import sys
from typing import Any, Dict, List, Optional

import requests


DEFAULT_HOST = "http://localhost:8080"


def print_response(resp: requests.Response) -> Any:
    print(f"HTTP {resp.status_code}\n")
    try:
        payload = resp.json()
        print(json.dumps(payload, indent=2))
        return payload
    except ValueError:
        print(resp.text)
        return None


def send(method: str, base_url: str, path: str, *, params: Optional[Dict[str, Any]] = None) -> Any:
    url = base_url.rstrip("/") + path
    if params:
        params = {key: value for key, value in params.items() if value is not None}
    resp = requests.request(method, url, params=params)
    payload = print_response(resp)
    if not resp.ok:
        sys.exit(1)
    return payload


def add_vehicle_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--make", required=True)
    parser.add_argument("--model", required=True)
    parser.add_argument("--year", required=True, type=int)
    parser.add_argument("--color", required=True)
    parser.add_argument("--capacity", required=True, type=int)
    parser.add_argument("--price", required=True, help="Price per day, e.g. 49.99")
    parser.add_argument("--type", required=True)


def vehicle_params(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "make": args.make,
        "model": args.model,
        "year": args.year,
        "color": args.color,
        "capacity": args.capacity,
        "price": args.price,
        "type": args.type,
    }


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Client for the vehicle rental backend")
    parser.add_argument("--host", default=DEFAULT_HOST, help="Backend base URL")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("vehicles", help="List all vehicles")

    vehicle = sub.add_parser("vehicle", help="Show one vehicle")
    vehicle.add_argument("--vid", required=True, type=int)

    search = sub.add_parser("filter", help="Search vehicles")
    search.add_argument("--make")
    search.add_argument("--model")
    search.add_argument("--year", type=int)
    search.add_argument("--color")
    search.add_argument("--min-capacity", type=int)
    search.add_argument("--max-price")
    search.add_argument("--type")

    cost = sub.add_parser("cost", help="Price a rental between two dates")
    cost.add_argument("--vid", required=True, type=int)
    cost.add_argument("--start", required=True, help="YYYY-MM-DD")
    cost.add_argument("--end", required=True, help="YYYY-MM-DD, not charged")

    rent = sub.add_parser("rent", help="Rent a vehicle")
    rent.add_argument("--vid", required=True, type=int)
    rent.add_argument("--fname", required=True)
    rent.add_argument("--lname", required=True)
    rent.add_argument("--email", required=True)
    rent.add_argument("--phone", required=True)
    rent.add_argument("--total-cost", required=True)

    ret = sub.add_parser("return", help="Return a rented vehicle")
    ret.add_argument("--vid", required=True, type=int)
    ret.add_argument("--user-id", required=True, type=int)

    add = sub.add_parser("add", help="Add a vehicle to the catalog")
    add_vehicle_arguments(add)

    update = sub.add_parser("update", help="Update a catalog vehicle")
    update.add_argument("--vid", required=True, type=int)
    add_vehicle_arguments(update)

    delete = sub.add_parser("delete", help="Delete a vehicle that is not rented")
    delete.add_argument("--vid", required=True, type=int)

    args = parser.parse_args(argv)
    host = args.host

    if args.command == "vehicles":
        send("GET", host, "/getAllVehicles")
    elif args.command == "vehicle":
        send("GET", host, "/getVehicle", params={"vid": args.vid})
    elif args.command == "filter":
        send(
            "GET",
            host,
            "/getFilteredVehicles",
            params={
                "make": args.make,
                "model": args.model,
                "year": args.year,
                "color": args.color,
                "minCapacity": args.min_capacity,
                "maxPrice": args.max_price,
                "type": args.type,
            },
        )
    elif args.command == "cost":
        send(
            "GET",
            host,
            "/getTotalCost",
            params={"vehicleId": args.vid, "startDate": args.start, "endDate": args.end},
        )
    elif args.command == "rent":
        result = send(
            "POST",
            host,
            "/rent",
            params={
                "fname": args.fname,
                "lname": args.lname,
                "email": args.email,
                "phonenum": args.phone,
                "vid": args.vid,
                "totalcost": args.total_cost,
            },
        )
        if result != 0:
            sys.exit(1)
    elif args.command == "return":
        if not send("POST", host, "/returnVehicle", params={"userid": args.user_id, "vid": args.vid}):
            sys.exit(1)
    elif args.command == "add":
        if not send("POST", host, "/addVehicle", params=vehicle_params(args)):
            sys.exit(1)
    elif args.command == "update":
        if not send("POST", host, "/updateVehicle", params={"vid": args.vid, **vehicle_params(args)}):
            sys.exit(1)
    elif args.command == "delete":
        if not send("POST", host, "/deleteVehicle", params={"vid": args.vid}):
            sys.exit(1)
    else:
        parser.error("Unsupported command")


if __name__ == "__main__":
    main()
