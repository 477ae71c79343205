import json, os, sys
import requests
URL = os.environ.get("DONUTVIZ_BASE_URL", "http://127.0.0.1:8000") + "/pie/render"


def run_once(values, labels=None, donut=0.0, gap=0.0):
    body = {"values": values, "labels": labels or [], "donut": donut, "gap": gap}
    r = requests.post(URL, json=body)
    if r.status_code == 400:
        print("rejected:", json.dumps(r.json()["errors"]))
        return None
    r.raise_for_status()
    return r.json()

def main(argv):
    values = argv[1] if len(argv) > 1 else "1;1;2;4"
    out = argv[2] if len(argv) > 2 else "pie.svg"
    j = run_once(values, donut=0.5, gap=0.02)
    if j is None:
        return 1
    with open(out, "w") as f:
        f.write(j["svg"])
    flags = "".join(s["large_arc_flag"] for s in j["segments"])
    print(f"slices={len(j['segments'])}  large_arc_flags={flags}  wrote={out}")
    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv))
