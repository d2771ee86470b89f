"""Role names stored on users."""

CARD_OWNER = "CARD-OWNER"
NON_OWNER = "NON-OWNER"
