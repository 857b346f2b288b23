"""
Showcase 01: Person and Affiliation Lookup

This showcase demonstrates the MaisPersonClient end to end:
1. Load connection settings from .env (MAIS_* variables)
2. Fetch a person record scoped to a few tags
3. Read names, contact details and the primary affiliation
4. Fetch the affiliation history and filter it by type

Requirements:
- MAIS_BASE_URL, MAIS_API_KEY and MAIS_API_CERT in .env file
- MAIS_SMOKE_SUNETID: the SUNetID to look up
- Network access to the MAIS registry

Status: Live demonstration with the real MAIS Person API
"""

import os
import sys

from dotenv import load_dotenv

print("=" * 80)
print("SHOWCASE 01: Person and Affiliation Lookup")
print("=" * 80)

# === Step 1: Setup ===

print("\n[Step 1] Loading configuration...")
load_dotenv()

from mais_person_client import MaisPersonClient
from mais_person_client.types import Tags

sunetid = os.getenv("MAIS_SMOKE_SUNETID")
if not os.getenv("MAIS_BASE_URL") or not sunetid:
    print("\n❌ ERROR: MAIS_BASE_URL or MAIS_SMOKE_SUNETID not found!")
    print("   Please set both in your .env file")
    sys.exit(1)

client = MaisPersonClient.from_env()
print(f"  ✓ Config loaded")
print(f"    - Base URL: {client.config.base_url}")
print(f"    - Client certificate: {'yes' if client.config.uses_client_certificate else 'NOT SET'}")
print(f"    - Available tags: {', '.join(Tags.list_available())}")

# === Step 2: Fetch person ===

print("\n" + "=" * 80)
print(f"[Step 2] Fetching person '{sunetid}' (tags: name, title, email, affiliation)")
print("=" * 80)

person = client.fetch_user(sunetid, tags=['name', 'title', 'email', 'affiliation'])
if person is None:
    print(f"\n❌ No person found for '{sunetid}'")
    sys.exit(1)

display = person.display_name
print(f"  ✓ Person found")
print(f"    - Display name: {display.full_name if display else 'N/A'}")
print(f"    - Job title: {person.job_title or 'N/A'}")
print(f"    - Primary email: {person.primary_email or 'N/A'}")
print(f"    - Academic Council: {person.is_academic_council()}")

# === Step 3: Primary affiliation ===

print("\n" + "=" * 80)
print("[Step 3] Primary affiliation")
print("=" * 80)

primary = person.primary_affiliation
if primary is None:
    print("  (no primary affiliation)")
else:
    print(f"    - Type: {primary.type}")
    print(f"    - Role: {person.primary_role}")
    print(f"    - Org code: {person.primary_org_code}")
    print(f"    - Effective: {person.primary_effective_date}")

# === Step 4: Affiliation history ===

print("\n" + "=" * 80)
print("[Step 4] Affiliation history")
print("=" * 80)

history = client.fetch_user_affiliations(sunetid)
if history is None:
    print("  (no affiliation document)")
else:
    for affiliation in history.affiliations():
        org = affiliation.department.organization if affiliation.department else None
        print(f"    [{affiliation.affnum}] {affiliation.type:<24} {org.adminid if org else '-'}")
    print(f"\n  ✓ Active: {len(history.active_affiliations())}")
    print(f"  ✓ Faculty: {len(history.faculty_affiliations())}")
    print(f"  ✓ Student: {len(history.student_affiliations())}")
    print(f"  ✓ Org ids: {', '.join(history.org_ids()) or 'none'}")

print("\n" + "=" * 80)
print("✅ SHOWCASE COMPLETE")
print("=" * 80)
