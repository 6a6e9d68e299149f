# authkeep

Reusable pieces for adding authentication features to a web application.
Nothing here is tied to a web framework: each module works on plain values
and objects, and leaves routing, sessions, storage and rendering to your
application.

## What is inside

- `authkeep.models`
  - `Email`: a message to send, with `to`, `cc`, `bcc`, their parallel
    `to_names`, `cc_names`, `bcc_names`, and `from_name`, `from_addr`,
    `reply_to_name`, `reply_to`, `subject`, `text_body` and `html_body`.
    A name list must be empty or exactly as long as its address list.
    Otherwise the constructor raises `ValueError`.
  - `OAuth2Provider`: a provider's `config`, the `additional_params` to add
    to the authorisation request, and a `find_user_details` callable.
- `authkeep.modules`
  - `Module`: a protocol for pluggable modules that have an `init(host)`
    method.
  - `ModuleRegistry`: a registry of named modules, with `register`,
    `registered` and `get`. `get` raises `KeyError` for an unknown name.
  - `register_module` and `registered_modules`: work on a default registry.
  - `ModuleLoader`: loads a shallow copy of a registered module for one host
    and calls its `init`. It reports `loaded()` and `is_loaded(name)`.
    `module_list(oauth2_providers)` returns `{name: True}` for every loaded
    module, plus an `oauth2.<provider>` entry for each provider.
    `annotate(data, oauth2_providers)` stores that mapping under the key
    `"modules"` in a view-data dict.
- `authkeep.otp`: single-use passwords kept as a comma-separated string of
  base64 SHA-512 digests. It has `generate_otp`, `hash_otp`, `split_otps`,
  `join_otps`, `match_otp`, `count_otps`, `add_otp` and `consume_otp`.
  - A user may hold at most five passwords. `add_otp` raises `OTPLimitError`
    beyond that.
  - `match_otp` raises `ValueError` if a stored digest is not valid base64.
- `authkeep.twofactor.recovery`: two-factor recovery codes.
  - `generate_recovery_codes` returns ten codes of the form `abcde-12345`.
  - `bcrypt_recovery_codes` hashes them with bcrypt (`$2a$`, cost 10).
  - `use_recovery_code` returns the remaining hashes after removing the one
    that matches, or `None` if none matches.
  - `encode_recovery_codes`, `decode_recovery_codes` and
    `count_recovery_codes` handle the comma-separated storage form.
- `authkeep.twofactor.payloads`: runtime-checkable protocols for form values.
  - `EmailVerifyTokenValuer` holds `token`.
  - `SMSValuer` and `TOTPCodeValuer` hold `code` and `recovery_code`.
  - `SMSPhoneNumberValuer` holds `phone_number`.
  - Each also has `validate()`.
  - The `must_have_*_values` / `must_have_sms_phone_number_value` functions
    return their argument, or raise `TypeError` if it does not fit.
- `authkeep.providers`: `google_user_details(access_token, session=None)`
  and `facebook_user_details(access_token, session=None)`.
  - They call the provider's user-info endpoint with a bearer token.
  - They return a dict keyed by `uid`, `email` and, for Facebook, `name`.
  - Failures raise `ProviderError`.
  - Pass any object with a `requests`-style `get` method as `session`.

## Installation

```
pip install authkeep
```

## Examples

One-time passwords:

```python
from authkeep.otp import add_otp, consume_otp, count_otps

otp, encoded = add_otp("")           # give `otp` to the user, store `encoded`
assert count_otps(encoded) == 1

remaining = consume_otp(encoded, otp)   # at sign-in; None if it did not match
assert remaining == ""
```

Recovery codes:

```python
from authkeep.twofactor.recovery import (
    bcrypt_recovery_codes, decode_recovery_codes,
    encode_recovery_codes, generate_recovery_codes, use_recovery_code,
)

codes = generate_recovery_codes()       # show these to the user once
stored = encode_recovery_codes(bcrypt_recovery_codes(codes))

remaining = use_recovery_code(decode_recovery_codes(stored), codes[0])
if remaining is not None:
    stored = encode_recovery_codes(remaining)
```

Modules:

```python
from authkeep.modules import ModuleLoader, ModuleRegistry

class Audit:
    def init(self, host):
        self.host = host

registry = ModuleRegistry()
registry.register("audit", Audit())

loader = ModuleLoader(registry)
loader.load("audit", host=object())
loader.module_list(["google"])   # {"audit": True, "oauth2.google": True}
```

OAuth2 user details:

```python
from authkeep.providers import google_user_details

details = google_user_details("token")
details["uid"], details["email"]
```

## What this package does not do

The package has no HTTP handlers, routes, middleware or session handling.
It stores nothing: saving users and their password or code strings is up to
your application. It also does not cover the following:

- locking accounts after failed sign-ins
- logging helpers
- e-mail verification tokens or links for two-factor setup
- running the OAuth2 authorisation flow itself

## Running the tests

```
pip install -e ".[test]"
pytest
```