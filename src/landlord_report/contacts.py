"""
Contact Sources

Activity tables are filled from a ContactSource. MockContactSource stands
in for a CRM with deterministic sample tenants.
"""

from typing import List, Protocol, Sequence

from .models import ContactRecord


class ContactSource(Protocol):
    """Anything that can return an ordered list of contacts."""

    def fetch_contacts(self, count: int) -> List[ContactRecord]:
        ...


OUTBOUND_COMPANIES = [
    'Starbucks Coffee', 'Chipotle Mexican Grill', 'Planet Fitness', 'Orangetheory Fitness',
    'Five Guys Burgers', 'Dunkin Donuts', 'Jersey Mikes Subs', 'Massage Envy', 'Great Clips',
    'Anytime Fitness', 'Sprint Mobile', 'H&R Block', 'Supercuts', 'Jimmy Johns', 'Subway',
    'Panera Bread', 'CVS Pharmacy', 'Walgreens', 'Dollar Tree', 'Dollar General',
    'AT&T Store', 'Verizon Wireless', 'T-Mobile', 'Cricket Wireless', 'Metro PCS',
    'Fantastic Sams', 'Sport Clips', 'Nail Salon Express', 'European Wax Center', 'Hand & Stone Massage',
    'LA Fitness', 'Crunch Fitness', '24 Hour Fitness', 'Snap Fitness', 'Retro Fitness',
    'Qdoba Mexican Grill', "Moe's Southwest Grill", 'Panda Express', 'Noodles & Company', 'Potbelly',
    'Firehouse Subs', 'Which Wich', 'Penn Station', 'Charleys Philly Steaks', 'Blaze Pizza',
]
OUTBOUND_CONTACTS = [
    'John Smith', 'Sarah Johnson', 'Mike Davis', 'Emily Wilson', 'Chris Anderson',
    'Jennifer Lee', 'David Brown', 'Amanda Taylor', 'Robert Martinez', 'Lisa Garcia',
    'Michael Thompson', 'Jessica White', 'Daniel Harris', 'Ashley Martin', 'James Rodriguez',
]
OUTBOUND_METHODS = ['Call', 'Email', 'Call', 'Email', 'Call']
OUTBOUND_STATUSES = ['Left VM', 'No Response', 'Responded', 'Follow-up', 'Declined', 'In Discussion']

INBOUND_COMPANIES = [
    'Target Corporation', 'Trader Joes', 'Whole Foods Market', 'HomeGoods',
    'TJ Maxx', 'Marshalls', 'Ulta Beauty', 'Sephora', 'Panera Bread', 'Shake Shack',
    'Lululemon', 'Apple Store', 'Best Buy', "Dick's Sporting Goods", 'Bed Bath & Beyond',
    'Ross Dress for Less', 'Burlington', 'Nordstrom Rack', 'DSW', 'Famous Footwear',
    'Pet Supplies Plus', 'PetSmart', 'Petco', 'Bath & Body Works', "Victoria's Secret",
    'Gap', 'Old Navy', 'Banana Republic', 'J.Crew', 'Ann Taylor',
    'Sweetgreen', 'Cava', 'Chipotle', 'CorePower Yoga',
]
INBOUND_CONTACTS = [
    'Jennifer Lee', 'David Brown', 'Amanda Taylor', 'Robert Martinez',
    'Lisa Garcia', 'Kevin White', 'Michelle Johnson', 'Brian Davis', 'Nicole Anderson',
    'Steven Wilson', 'Rachel Thompson', 'Andrew Harris', 'Stephanie Martin',
]
INBOUND_METHODS = ['Call', 'Email', 'Portal', 'Call', 'Email']
INBOUND_STATUSES = ['In Discussion', 'Scheduled Tour', 'Sent Info', 'Awaiting Response', 'Hot Lead']


class MockContactSource:
    """Cycles through fixed rosters to produce sample contacts."""

    def __init__(self, companies: Sequence[str], contacts: Sequence[str],
                 methods: Sequence[str], statuses: Sequence[str], date_days: int = 14):
        if not (companies and contacts and methods and statuses):
            raise ValueError("Mock rosters must not be empty")
        self.companies = list(companies)
        self.contacts = list(contacts)
        self.methods = list(methods)
        self.statuses = list(statuses)
        self.date_days = date_days

    def fetch_contacts(self, count: int) -> List[ContactRecord]:
        if count < 0:
            raise ValueError(f"Contact count must be non-negative, got {count}")
        return [
            ContactRecord(
                company=self.companies[i % len(self.companies)],
                contact=self.contacts[i % len(self.contacts)],
                date=f'1/{(i % self.date_days) + 1}/25',
                method=self.methods[i % len(self.methods)],
                status=self.statuses[i % len(self.statuses)],
            )
            for i in range(count)
        ]


def outbound_source() -> MockContactSource:
    """Sample tenants the leasing team reached out to."""
    return MockContactSource(OUTBOUND_COMPANIES, OUTBOUND_CONTACTS, OUTBOUND_METHODS, OUTBOUND_STATUSES)


def inbound_source() -> MockContactSource:
    """Sample tenants who reached out to the leasing team."""
    return MockContactSource(INBOUND_COMPANIES, INBOUND_CONTACTS, INBOUND_METHODS, INBOUND_STATUSES)
