import logging
from collections import defaultdict

import httpx

logger = logging.getLogger("honeycomb")


def format_message(words: list[str], layers: int, words_per_group: int = 10) -> tuple[str, str]:
    """Build the (title, body) of a results notification, words grouped by length."""
    by_length: dict[int, list[str]] = defaultdict(list)
    for w in words:
        by_length[len(w)].append(w)

    title = f"Honeycomb L={layers} - {len(words)} words"

    # Longest words are the interesting ones
    selected = []
    for length in sorted(by_length.keys(), reverse=True):
        selected.extend(by_length[length][:words_per_group])

    counts = " | ".join(f"{l}L:{len(g)}" for l, g in sorted(by_length.items()))
    body = ",".join(selected) + "\n\n" + counts
    return title, body


async def send_notification(
    words: list[str],
    layers: int,
    timings: dict,
    topic: str,
    ntfy_url: str = "https://ntfy.sh",
    words_per_group: int = 10,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bool:
    """Send solve results to ntfy.sh. Best-effort: failures are logged, not raised."""
    try:
        title, body = format_message(words, layers, words_per_group)
        if "total" in timings:
            title += f" ({timings['total']:.0f}ms)"

        async with httpx.AsyncClient(timeout=10.0, transport=transport) as client:
            resp = await client.post(
                f"{ntfy_url}/{topic}",
                content=body.encode("utf-8"),
                headers={
                    "Title": title,
                    "Priority": "default",
                    "Tags": "honeybee",
                },
            )
            resp.raise_for_status()
            logger.info("Notification sent to %s/%s (status %d)", ntfy_url, topic, resp.status_code)
            return True

    except Exception as e:
        logger.error("Failed to send notification: %s", e)
        return False
