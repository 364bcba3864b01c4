# sitevigia

The core of a website monitoring backend. It has record types for plans,
users, monitored websites, uptime checks, performance reports, SEO audits,
subscriptions and incidents. It also has a small SQL query layer, request
validation, repositories, bcrypt password helpers, and the services that
register users and create plans.

## Installation

```
pip install sitevigia
```

To run the tests:

```
pip install "sitevigia[test]"
pytest
```

## Modules

### `sitevigia.db_models`

Frozen dataclasses for rows as the database returns them:

- `Plan`
- `User`
- `Website`
- `UptimeCheck`
- `PerformanceReport`
- `SeoAudit`
- `Subscription`
- `Incident`

`Plan.price_monthly` holds the decimal price as text. `SeoAudit.results` holds
the raw JSON bytes.

### `sitevigia.queries`

`Queries(conn)` runs the application's SQL statements against any DB-API
connection that uses the `qmark` (`?`) parameter style, such as `sqlite3`. It
has these methods:

- `create_plan`
- `get_plan_by_name`
- `get_user`, which looks a user up by e-mail
- `get_user_by_id`
- `register_user`

`with_tx(tx)` returns a `Queries` object that is bound to another connection or
transaction. When a single-row lookup finds nothing, the method raises
`NoRowsError`, which is a subclass of `LookupError`. UUID parameters are bound
as strings. UUID and timestamp columns are parsed from their stored form.
`CreatePlanParams` and `RegisterUserParams` hold the values to insert.
`Queries` never commits or rolls back, so the owner of the connection must do
it.

### `sitevigia.models`

API-facing dataclasses:

- `Plan`
- `User`
- `Website`
- `WebsiteWithUser`
- `UptimeCheck`
- `PerformanceReport`
- `SEOAudit`
- `Subscription`
- `Incident`

`to_json_dict(model)` turns a model into a JSON-ready dict. UUIDs become
strings and datetimes become RFC 3339 text, with naive datetimes taken as UTC.
The user's `password_hash` is left out. For any other argument that is not a
dataclass instance, the function raises `TypeError`.

`seo_results_value(results)` encodes SEO results as compact JSON bytes, and
`None` stays `None`. `seo_results_scan(value)` decodes `None`, `bytes` or
`str`. It raises `TypeError` for any other type and `ValueError` when the JSON
is not an object.

### `sitevigia.dto`

`CreatePlanRequest` and `RegisterUserRequest` are request payloads. Their
`validate()` method returns the request unchanged when every rule holds.
Otherwise it raises `ValidationError`, and the error's `failures` attribute
lists the `(field, tag)` pairs. The rules are:

- **Plan name:** 1 to 100 characters.
- **Plan price:** a decimal string of at least `0.01`.
- **`max_websites` and `check_interval_seconds`:** 1 to 100.
- **The three feature flags:** all required, which means each must be `True`.
- **User name:** 1 to 255 characters.
- **User e-mail:** a valid address of at most 255 characters.
- **User password:** 8 to 128 characters.

### `sitevigia.repository`

`PlanRepository(conn)` has `create_plan` and `get_plan_by_name`.
`UserRepository(conn)` has `register_user` and `get_user_by_email`. Both are
built on `Queries`.

### `sitevigia.passwords`

`hash_password(password, cost=10)` returns a bcrypt hash. A cost below 4 falls
back to 10. It raises `ValueError` when the cost is above 31 or the password is
longer than 72 bytes.

`verify_password(password, password_hash)` returns `True` or `False`. It
returns `False` for a malformed hash.

### `sitevigia.services`

`PlanService(repo).create_plan(request)` validates the request. It raises
`PlanAlreadyExistsError` when a plan with that name exists. Otherwise it stores
the plan.

`UserService(repo).register_user(request)` validates the request. It raises
`UserAlreadyExistsError` when the e-mail is taken. Otherwise it hashes the
password with bcrypt at cost 12, trims the name, trims and lower-cases the
e-mail, and stores the user with no verification time.

Validation failures raise `InvalidInputError`, and hashing failures raise
`HashPasswordError`. When the lookup fails for any other reason, the service
raises a plain `ServiceError`. All of these derive from `ServiceError`.

## Example

```python
import sqlite3

from sitevigia.dto import RegisterUserRequest
from sitevigia.repository import UserRepository
from sitevigia.services import UserAlreadyExistsError, UserService

conn = sqlite3.connect("sitevigia.db")  # must already hold a "users" table
service = UserService(UserRepository(conn))

password = "password"
request = RegisterUserRequest(name="Ana", email="ana@example.com", password=password)
try:
    service.register_user(request)
    conn.commit()
except UserAlreadyExistsError:
    print("already registered")
```

## What this package does not do

- It does not create or migrate the database schema. The `plans` and `users`
  tables must already exist, and the database must fill in ids and timestamps.
- It has no HTTP server, routes or command-line tool.
- It does not check websites. There are record types for uptime checks,
  performance reports, SEO audits and incidents, but nothing produces or
  stores them.
- It has queries only for plans and users. It does not cover websites,
  subscriptions or the other record types.