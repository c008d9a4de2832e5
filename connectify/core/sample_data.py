# connectify/core/sample_data.py

"""Seed data for a first launch, when no address book file exists yet."""

from .address_book import AddressBook
from .entities import Company, Person


def get_sample_persons() -> tuple:
    return (
        Person("Alex Yeoh", "87438807", "alexyeoh@example.com", "Blk 30 Geylang Street 29, #06-40",
               tags=("friends",)),
        Person("Bernice Yu", "99272758", "berniceyu@example.com", "Blk 30 Lorong 3 Serangoon Gardens, #07-18",
               tags=("colleagues", "friends")),
        Person("Charlotte Oliveiro", "93210283", "charlotte@example.com", "Blk 11 Ang Mo Kio Street 74, #11-04",
               tags=("neighbours",)),
        Person("David Li", "91031282", "lidavid@example.com", "Blk 436 Serangoon Gardens Street 26, #16-43",
               note="Met at the career fair.", tags=("family",)),
    )


def get_sample_companies() -> tuple:
    persons = get_sample_persons()
    return (
        Company("Google", "Technology", "Singapore", "Search and cloud services", "https://www.google.com",
                "careers@google.com", "65218000", "70 Pasir Panjang Road", people=persons[:2]),
        Company("Grab", "Transport", "Singapore", "Ride hailing and delivery", "https://www.grab.com",
                "support@grab.com", "62288000", "3 Media Close", people=persons[2:3]),
    )


def get_sample_address_book() -> AddressBook:
    book = AddressBook()
    book.set_persons(get_sample_persons())
    book.set_companies(get_sample_companies())
    return book
