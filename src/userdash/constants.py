"""Application-wide constants."""

APP_TITLE = "User Dashboard"
APP_SUBTITLE = "システムユーザー管理"

DEFAULT_ENDPOINT = "https://jsonplaceholder.typicode.com/users"
DEFAULT_INITIAL_DELAY_MS: int = 800

# Shown when the endpoint answers with a non-success status.
FETCH_FAILED_MESSAGE = "データの取得に失敗しました"

SEARCH_PLACEHOLDER = "検索..."

ACTIVE_LABEL = "Active"
INACTIVE_LABEL = "Inactive"

# Sample records in the endpoint's own shape, served by MockUserProvider.
MOCK_USERS: list[dict] = [
    {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "company": {"name": "Romaguera-Crona"},
    },
    {
        "id": 2,
        "name": "Ervin Howell",
        "username": "Antonette",
        "email": "Shanna@melissa.tv",
        "company": {"name": "Deckow-Crist"},
    },
    {
        "id": 3,
        "name": "Clementine Bauch",
        "username": "Samantha",
        "email": "Nathan@yesenia.net",
        "company": {"name": "Romaguera-Jacobson"},
    },
    {
        "id": 4,
        "name": "Patricia Lebsack",
        "username": "Karianne",
        "email": "Julianne.OConner@kory.org",
        "company": {"name": "Robel-Corkery"},
    },
    {
        "id": 5,
        "name": "Chelsey Dietrich",
        "username": "Kamren",
        "email": "Lucio_Hettinger@annie.ca",
        "company": {"name": "Keebler LLC"},
    },
    {
        "id": 6,
        "name": "Mrs. Dennis Schulist",
        "username": "Leopoldo_Corkery",
        "email": "Karley_Dach@jasper.info",
        "company": {"name": "Considine-Lockman"},
    },
]

HELP_TEXT = """\
 Search
 ──────────────────────────────
 /            Focus search
 Escape       Clear search

 General
 ──────────────────────────────
 ?            Toggle this help
 q            Quit\
"""
