#!/usr/bin/env python3
import requests
import sys

def check_page(url="http://127.0.0.1:8080/notifications"):
    print(f"Checking notifications page at {url}...")
    try:
        response = requests.get(url, timeout=5)
        response.raise_for_status()
        page = response.json()

        print("SUCCESS: Notifications endpoint is reachable.")
        print("-" * 40)
        print(f"State: {page['state']} (unread before visit: {page['unread']})")

        if page["state"] != "populated":
            print(page["messages"].get("body", ""))
            return 0

        if page["show_disclaimer"]:
            print(page["messages"]["disclaimer"])
        for record in page["records"]:
            print(f"[{record['timestamp']}] {record['title']}")
            for line in record["subtitle_lines"] + record["detail_lines"]:
                print(f"    {line}")

        return 0
    except Exception as e:
        print(f"FAILURE: Could not reach notifications endpoint: {e}")
        print("This suggests tn_main.py is not running or the web interface is disabled.")
        return 1

if __name__ == "__main__":
    sys.exit(check_page(*sys.argv[1:2]))
