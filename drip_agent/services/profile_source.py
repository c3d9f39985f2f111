"""
Profile acquisition: scraping, manual input, and demo fallbacks.
"""

import re
from typing import Optional

import httpx
import structlog

from drip_agent.core.config import Settings, get_settings
from drip_agent.core.exceptions import (
    ProfileNotFoundError,
    ProfileRateLimitedError,
    ProfileSourceError,
    ProfileTimeoutError,
)
from drip_agent.models.profile import Profile

logger = structlog.get_logger(__name__)

_TOKEN_SPLIT_RE = re.compile(r"[^a-z]+")


def clean_handle(handle: str) -> str:
    return (handle or "").replace("@", "").strip()


def parse_local_input(text: str, handle: str = "demo_user") -> Profile:
    """Build a profile from pasted text, one post per line. Never fails."""
    lines = [line.strip() for line in (text or "").split("\n")]
    tweets = [line for line in lines if line]

    return Profile(
        handle=handle,
        bio=tweets[0][:160] if tweets else "",
        followers=1000,
        following=500,
        tweets=tweets,
    )


# Demo personas: (handle substrings, whole handle tokens, bio, followers, following, posts)
DEMO_PROFILES: list[tuple[tuple[str, ...], tuple[str, ...], str, int, int, list[str]]] = [
    (
        ("girl", "queen", "lady", "woman", "femme"),
        ("her", "she"),
        "Founder & CEO. Building the future of fintech. Ex-Goldman. Angel investor.",
        12840,
        1103,
        [
            "Closed our Series A today. Grateful for a team that never stops.",
            "Reminder: you don't need permission to build something great.",
            "Board meeting in the morning, pitch practice at night. Founder life.",
            "Investing in women-led startups is not charity. It's alpha.",
            "Sharp blazer, white sneakers, and a deck that closes. Uniform.",
            "Spent the weekend at a design museum. Inspired by clean lines.",
            "Hiring senior engineers who care about craft. DMs open.",
            "Quality over quantity in everything: product, people, wardrobe.",
            "Flew to NYC for two days of meetings. Carry-on only, always.",
            "Great founders are great editors. Cut everything that doesn't matter.",
        ],
    ),
    (
        ("dev", "code", "eng", "hack", "build"),
        (),
        "Staff Engineer. Distributed systems, Rust, and too much coffee. Opinions are my own.",
        3210,
        640,
        [
            "Rewrote the hot path in Rust. p99 latency down 40%.",
            "Mechanical keyboard number four arrived. I have a problem.",
            "Code review is a conversation, not a gatekeeping exercise.",
            "Hoodie, cargo pants, trail runners. I don't understand dress codes.",
            "Spent all day chasing a race condition. It was a missing await.",
            "Vim or nothing. Don't @ me.",
            "Our on-call rotation is finally humane. Small wins.",
            "Best debugging tool is a walk outside.",
            "Open-sourced the internal tooling we've used for a year.",
            "Conference talk accepted! Time to panic about slides.",
        ],
    ),
    (
        ("art", "design", "photo", "creat", "studio", "music"),
        (),
        "Designer & photographer. Color obsessed. Studio in Brooklyn.",
        8750,
        1420,
        [
            "Golden hour on the rooftop. Film photos coming soon.",
            "Thrifted a vintage wool coat today and I'm never taking it off.",
            "Mood board for the new collection: rust, olive, and deep teal.",
            "Gallery opening tonight, wearing all black like a cliché.",
            "Typography is just fashion for words.",
            "New prints in the shop. Each one is hand-signed.",
            "Studio playlist is 90% ambient, 10% Talking Heads.",
            "Found the perfect linen for the summer lookbook shoot.",
            "Sketching at the café again. The barista knows my order.",
            "Creativity is just curiosity with a deadline.",
        ],
    ),
]

GENERIC_DEMO = (
    "Builder. Hacker. Coffee enthusiast. Shipping code and taking names.",
    5420,
    892,
    [
        "Just shipped a new feature at 3am. Sleep is for the weak.",
        "Hot take: TypeScript > JavaScript. Fight me.",
        "The future is agents. Everything will be automated.",
        "Currently obsessed with minimalist design and black coffee.",
        "Why do meetings exist when we have Slack?",
        "Building in public is the way. Transparency wins.",
        "AI is not going to take your job. Someone using AI will.",
        "Startup life: 80 hour weeks but at least I'm my own boss lol",
        "Clean code is a love language.",
        "Just discovered a new coffee shop. Productivity +100%",
    ],
)


def demo_profile(handle: str) -> Profile:
    """
    Pick a demo persona by keywords in the handle, else the generic founder.

    Short pronoun keywords only match whole tokens, so "archer_dev" is not
    read as "her".
    """
    key = (handle or "").lower()
    tokens = set(_TOKEN_SPLIT_RE.split(key))
    bio, followers, following, tweets = GENERIC_DEMO

    for stems, words, demo_bio, demo_followers, demo_following, demo_tweets in DEMO_PROFILES:
        if any(stem in key for stem in stems) or tokens.intersection(words):
            bio, followers, following, tweets = demo_bio, demo_followers, demo_following, demo_tweets
            break

    return Profile(
        handle=handle,
        bio=bio,
        followers=followers,
        following=following,
        tweets=list(tweets),
    )


class ProfileSource:
    """Fetches social profiles through the Apify Twitter scraper actor."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.transport = transport

    def parse_local_input(self, text: str, handle: str = "demo_user") -> Profile:
        return parse_local_input(text, handle)

    async def fetch_profile(self, handle: str) -> Profile:
        """
        Scrape a profile and its recent posts.

        Raises:
            ProfileNotFoundError: the actor returned no items
            ProfileRateLimitedError: the actor answered HTTP 429
            ProfileTimeoutError: the actor did not answer in time
            ProfileSourceError: any other failure, including a missing token
        """
        handle = clean_handle(handle)
        if not self.settings.apify_api_token:
            raise ProfileSourceError("Apify API token not configured", handle=handle)

        logger.info("Scraping profile", handle=handle)

        url = (
            f"{self.settings.apify_base_url.rstrip('/')}/acts/"
            f"{self.settings.apify_actor}/run-sync-get-dataset-items"
        )
        payload = {
            "startUrls": [f"https://twitter.com/{handle}"],
            "tweetsDesired": self.settings.apify_tweets_desired,
            "includeUserInfo": True,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.apify_timeout,
                transport=self.transport,
            ) as client:
                response = await client.post(
                    url,
                    params={"token": self.settings.apify_api_token},
                    json=payload,
                )
                response.raise_for_status()
                items = response.json()
        except httpx.TimeoutException as e:
            raise ProfileTimeoutError(f"Scrape timed out for @{handle}", handle=handle) from e
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 429:
                raise ProfileRateLimitedError(f"Scrape rate limited for @{handle}", handle=handle) from e
            if e.response.status_code == 404:
                raise ProfileNotFoundError(f"Could not find profile: @{handle}", handle=handle) from e
            raise ProfileSourceError(f"Scrape failed: {e}", handle=handle) from e
        except (httpx.HTTPError, ValueError) as e:
            raise ProfileSourceError(f"Scrape failed: {e}", handle=handle) from e

        if not isinstance(items, list) or not items:
            raise ProfileNotFoundError(f"Could not find profile: @{handle}", handle=handle)

        first = items[0] if isinstance(items[0], dict) else {}
        user = first.get("user") or {}
        tweets = [
            item["full_text"]
            for item in items
            if isinstance(item, dict) and item.get("full_text")
        ][: self.settings.apify_tweets_desired]

        logger.info("Profile scraped", handle=handle, tweets=len(tweets))

        return Profile(
            handle=handle,
            bio=user.get("description") or "",
            followers=user.get("followers_count") or 0,
            following=user.get("friends_count") or 0,
            tweets=tweets,
            location=user.get("location") or None,
            name=user.get("name") or None,
            profile_image_url=user.get("profile_image_url_https") or None,
        )
