from behave import given, when, then

from common import split_object_ref

# ---------------- Background ----------------
@given('the ingest endpoint is available at "{path}"') # type: ignore[no-untyped-def]
def step_ingest_endpoint(ctx, path):
    ctx.ingest_url = path

# ---------------- Arrange ----------------
@given('object "{ref}" is detected as {labels:List}') # type: ignore[no-untyped-def]
def step_detected(ctx, ref, labels):
    ctx.rekognition.labels[ref] = labels

@given('object "{ref}" has custom labels "{raw}"') # type: ignore[no-untyped-def]
def step_custom_labels(ctx, ref, raw):
    ctx.s3.metadata[ref] = {"customlabels": raw}

@given('object "{ref}" is not a valid image') # type: ignore[no-untyped-def]
def step_invalid(ctx, ref):
    ctx.rekognition.invalid.add(ref)

# ---------------- Act ----------------
@when('S3 notifies uploads of {refs:List}') # type: ignore[no-untyped-def]
def step_notify(ctx, refs):
    records = []
    for ref in refs:
        bucket, key = split_object_ref(ref)
        records.append({
            "eventSource": "aws:s3",
            "eventTime": "2024-05-01T10:00:00.000Z",
            "s3": {"bucket": {"name": bucket}, "object": {"key": key}},
        })
    ctx.last_response = ctx.client.post(ctx.ingest_url, json={"Records": records})
    assert ctx.last_response.status_code == 200, ctx.last_response.text

# ---------------- Assert ----------------
@then('the ingest response lists status "{status}" for "{key}"') # type: ignore[no-untyped-def]
def step_item_status(ctx, status, key):
    items = {it["key"]: it for it in ctx.last_response.json()}
    assert key in items, f"{key} missing from {list(items)}"
    assert items[key]["status"] == status, items[key]

@then('the index holds "{key}" in bucket "{bucket}" with labels {labels:List}') # type: ignore[no-untyped-def]
def step_indexed_doc(ctx, key, bucket, labels):
    doc = ctx.opensearch.by_key(key)
    assert doc is not None, f"{key} was not indexed"
    assert doc["bucket"] == bucket
    assert doc["labels"] == labels
    assert doc["createdTimestamp"] == "2024-05-01T10:00:00.000Z"

@then('the index holds {count:d} documents') # type: ignore[no-untyped-def]
def step_doc_count(ctx, count):
    assert len(ctx.opensearch.docs) == count
