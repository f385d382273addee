import json

TRACE_STEPS = [
    {"index": 0, "children": [{"key": "home"}]},
    {"index": 1, "children": [{"key": "home"}, {"key": "detail", "id": 7}]},
    {"index": 0, "children": [{"key": "home"}]},
    {"index": 0, "children": [{"key": "home"}], "retire": ["scene_detail"]},
]


def write_jsonl(path, records):
    with open(path, "w", encoding="utf-8") as f:
        for rec in records:
            f.write(json.dumps(rec) + "\n")
    return str(path)
