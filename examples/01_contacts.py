"""
Example 01: Contacts

This example demonstrates saving, finding and deleting records by example,
and loading a one-to-many relation.
"""

from dataclasses import dataclass
from typing import Optional
import tempfile

from active_row import (
    ActiveRecord,
    ConnectionConfig,
    ConnectionManager,
    configure_logging,
    one_to_many,
    primary_key,
)


@dataclass
class Contact(ActiveRecord):
    """A contact row"""
    id: Optional[int] = primary_key()
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    groupId: Optional[int] = None


@dataclass
class ContactGroup(ActiveRecord):
    """A group owning many contacts"""
    id: Optional[int] = primary_key()
    name: Optional[str] = None
    contacts: Optional[list] = one_to_many(Contact, foreign_key="groupId")


def main():
    configure_logging("INFO")

    db_file = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
    db_path = db_file.name
    db_file.close()

    provider = ConnectionManager(ConnectionConfig(driver="sqlite", database=db_path, pool_size=2))
    with provider.get_connection() as conn:
        conn.execute(
            "CREATE TABLE Contact (id INTEGER PRIMARY KEY, firstName TEXT, "
            "lastName TEXT, email TEXT, groupId INTEGER)"
        )
        conn.execute("CREATE TABLE ContactGroup (id INTEGER PRIMARY KEY, name TEXT)")
        conn.commit()

    # Insert: a null key means the row is new
    group = ContactGroup(name="family")
    group.save(provider)
    print(f"Created group {group.id}")

    for first_name in ["Guillaume", "Marie", "Paul"]:
        Contact(firstName=first_name, lastName="Wallet", groupId=group.id).save(provider)

    # Find by example: non-null attributes become predicates
    wallets = Contact(lastName="Wallet").find(provider)
    print(f"Found {len(wallets)} Wallets")

    # Update: a non-null key means the row exists
    guillaume = Contact(firstName="Guillaume").find_one(provider)
    guillaume.email = "wallet.guillaume@gmail.com"
    guillaume.save(provider)

    # Relations load eagerly
    family = ContactGroup(id=group.id).find_one(provider)
    print(f"{family.name}: {[c.firstName for c in family.contacts]}")

    # Many-to-one lookup
    parent = guillaume.find_parent(provider, ContactGroup, "groupId")
    print(f"Guillaume belongs to {parent.name}")

    # Delete by example
    Contact(firstName="Paul").delete(provider)
    print(f"Remaining: {[c.firstName for c in Contact().find(provider)]}")

    provider.close_pool()


if __name__ == "__main__":
    main()
