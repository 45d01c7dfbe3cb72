def tally_voting_event(event):
    counts = {}
    for record in event.voting_records:
        label = (record.result or "").strip()
        counts[label] = counts.get(label, 0) + 1

    total_votes = sum(counts.values())

    results = []
    for label, count in counts.items():
        percent = (count / total_votes * 100) if total_votes > 0 else 0
        results.append({"result": label, "count": count, "percent": percent})

    results.sort(key=lambda row: (-row["count"], row["result"].lower()))

    return {
        "total_votes": total_votes,
        "results": results,
        "is_tie": len(results) > 1 and results[0]["count"] == results[1]["count"],
    }
