from behave import given, when, then

from photoindex.core.timestamps import event_time_or_now
import common  # noqa: F401  registers the List type

def _slot(value: str):
    return {"value": {"originalValue": value, "interpretedValue": value, "resolvedValues": []}}

def _result_keys(ctx):
    return [h["objectKey"] for h in ctx.last_response.json()]

# ---------------- Background ----------------
@given('the search endpoint is available at "{path}"') # type: ignore[no-untyped-def]
def step_endpoint(ctx, path):
    ctx.search_url = path

@given('the index contains') # type: ignore[no-untyped-def]
def step_seed_index(ctx):
    for row in ctx.table:
        labels = [l.strip() for l in row["labels"].split(",") if l.strip()]
        ctx.opensearch.index(index="photos", body={
            "objectKey": row["objectKey"],
            "bucket": row["bucket"],
            "createdTimestamp": event_time_or_now(None),
            "labels": labels,
        })

# ---------------- Intent recognition ----------------
@given('the bot recognizes "{text}" as {intent} with keyword1 "{first}" and keyword2 "{second}"') # type: ignore[no-untyped-def]
def step_two_slots(ctx, text, intent, first, second):
    ctx.lex.intents[text] = {"name": intent, "slots": {
        "keyword1": _slot(first), "keyword2": _slot(second), "keyword": None,
    }}

@given('the bot recognizes "{text}" as {intent} with keyword "{value}"') # type: ignore[no-untyped-def]
def step_legacy_slot(ctx, text, intent, value):
    ctx.lex.intents[text] = {"name": intent, "slots": {
        "keyword1": None, "keyword2": None, "keyword": _slot(value),
    }}

# ---------------- Act ----------------
@when('I search for "{q}"') # type: ignore[no-untyped-def]
def step_search(ctx, q):
    ctx.last_response = ctx.client.get(ctx.search_url, params={"q": q})

# ---------------- Assert ----------------
@then('the response status is {code:d}') # type: ignore[no-untyped-def]
def step_status(ctx, code):
    assert ctx.last_response.status_code == code, ctx.last_response.text

@then('the search terms include {terms:List}') # type: ignore[no-untyped-def]
def step_terms(ctx, terms):
    sent = ctx.opensearch.search_calls[-1]["query"]["terms"]["labels"]
    assert set(terms) <= set(sent), sent
    assert len(sent) == len(set(sent)), "duplicate search terms"

@then('the results are exactly {keys:List}') # type: ignore[no-untyped-def]
def step_exact_results(ctx, keys):
    assert sorted(_result_keys(ctx)) == sorted(keys)

@then('every result has a public url') # type: ignore[no-untyped-def]
def step_urls(ctx):
    for h in ctx.last_response.json():
        assert h["url"] == f"https://{h['bucket']}.s3.amazonaws.com/{h['objectKey']}"

@then('the results are empty') # type: ignore[no-untyped-def]
def step_empty(ctx):
    assert ctx.last_response.json() == []

@then('the index was not queried') # type: ignore[no-untyped-def]
def step_not_queried(ctx):
    assert ctx.opensearch.search_calls == []

@then('the bot was not asked') # type: ignore[no-untyped-def]
def step_not_asked(ctx):
    assert ctx.lex.calls == []
