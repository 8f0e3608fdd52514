
from datetime import datetime, timezone

from soqlescape import join, like, literal, raw, soql

ACCOUNT_FIELDS = ["Id", "Name", "Industry"]

search = "100% Organic_Farms"
industries = ["Agriculture", "Food & Beverage"]

query = soql(
    "SELECT {fields} FROM Account WHERE Name LIKE {pattern} AND Industry IN {industries} "
    "AND CreatedDate > {since} AND LastActivityDate = {window}",
    fields=join([raw(field) for field in ACCOUNT_FIELDS]),
    pattern=like(search),
    industries=industries,
    since=datetime(2024, 1, 1, tzinfo=timezone.utc),
    window=literal("LAST_N_DAYS", 30),
)
print(query)
