"""
Smoke check against a running userhub deployment.
Exercises health, user creation, user listing and the htmx fragment.

    SMOKE_BASE_URL=http://localhost:3000 python smoke_check.py
"""
import os
import sys
import time

import requests

BASE_URL = os.environ.get("SMOKE_BASE_URL", "http://localhost:3000").rstrip("/")
TIMEOUT = 10


def print_header(text):
    print("\n" + "=" * 60)
    print(text)
    print("=" * 60)


def check_health():
    """Check health endpoint."""
    print_header("Checking Health Endpoint")
    try:
        response = requests.get(f"{BASE_URL}/health", timeout=TIMEOUT)
        if response.status_code == 200:
            print("✅ Health check passed")
            print(f"   Response: {response.json()}")
            return True
        print(f"❌ Health check failed: {response.status_code}")
        return False
    except requests.exceptions.RequestException as e:
        print(f"❌ Health check error: {e}")
        return False


def check_create_user(username):
    """Create a user and confirm the response carries a real id."""
    print_header(f"Creating User: {username}")
    try:
        response = requests.post(
            f"{BASE_URL}/users",
            json={'username': username},
            timeout=TIMEOUT,
        )
        if response.status_code != 201:
            print(f"❌ Create failed: {response.status_code}")
            print(f"   Response: {response.text[:200]}")
            return None
        data = response.json()
        print(f"✅ Created user id={data.get('id')}")
        return data
    except requests.exceptions.RequestException as e:
        print(f"❌ Create error: {e}")
        return None


def check_list_users(expected):
    """List users and look for the one just created."""
    print_header("Listing Users")
    try:
        response = requests.get(f"{BASE_URL}/users", timeout=TIMEOUT)
        response.raise_for_status()
        users = response.json()
        print(f"✅ {len(users)} user(s) returned")
        if expected not in users:
            print(f"❌ Created user {expected} missing from list")
            return False
        return True
    except requests.exceptions.RequestException as e:
        print(f"❌ List error: {e}")
        return False


def check_htmx_fragment(username):
    """The fragment should render the new username (skipped when views are off)."""
    print_header("Checking HTML Fragment")
    try:
        response = requests.get(f"{BASE_URL}/htmx-users", timeout=TIMEOUT)
        if response.status_code == 404:
            print("⚠️  HTML views are disabled on this deployment")
            return True
        response.raise_for_status()
        if username in response.text:
            print("✅ Fragment lists the new user")
            return True
        print("❌ Fragment does not mention the new user")
        return False
    except requests.exceptions.RequestException as e:
        print(f"❌ Fragment error: {e}")
        return False


def main():
    """Run all checks."""
    print_header("USERHUB SMOKE CHECK")
    print(f"Server: {BASE_URL}")

    username = f"smoke-{int(time.time())}"
    results = {'health': check_health()}

    created = check_create_user(username) if results['health'] else None
    results['create'] = created is not None
    results['list'] = check_list_users(created) if created else False
    results['fragment'] = check_htmx_fragment(username) if created else False

    print_header("SUMMARY")
    for name, result in results.items():
        status = "✅ PASS" if result else "❌ FAIL"
        print(f"{status} - {name.upper()}")

    passed = sum(results.values())
    print(f"\nResults: {passed}/{len(results)} checks passed")
    return 0 if passed == len(results) else 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user")
        sys.exit(1)
