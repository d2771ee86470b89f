"""Domain types: the cash card record and the paging/sorting contract."""
