def enrich_records(records, counts):
    # shallow copies; the caller's dicts stay untouched
    return [
        {**item, "totalDescendants": counts.get(item["id"], 0)}
        for item in records
    ]
