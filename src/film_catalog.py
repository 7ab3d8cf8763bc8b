"""
Film catalog lookups against TMDB: search, details with credits, popular films.
"""

import logging
import requests
import streamlit as st

from utils import get_language_name

logger = logging.getLogger(__name__)

TMDB_BASE_URL = "https://api.themoviedb.org/3"
REQUEST_TIMEOUT = 10
MIN_QUERY_LENGTH = 2

COMPOSER_JOBS = {"Original Music Composer", "Music", "Composer", "Music Director"}
EXCLUDED_SOUND_JOBS = {"Sound Designer", "Sound Mixer"}

def get_tmdb_api_key(api_key=None):
    """Explicit key if given, otherwise TMDB_API_KEY from Streamlit secrets."""
    if api_key:
        return api_key
    return st.secrets["TMDB_API_KEY"]

def _get_json(path, params, api_key=None):
    """
    GET a TMDB endpoint.

    Returns:
        Decoded JSON dict, or None on any network, HTTP or decoding failure
    """
    params = dict(params, api_key=get_tmdb_api_key(api_key))
    try:
        response = requests.get(f"{TMDB_BASE_URL}{path}", params=params, timeout=REQUEST_TIMEOUT)
        if response.status_code != 200:
            logger.warning("TMDB %s returned HTTP %s", path, response.status_code)
            return None
        return response.json()
    except requests.RequestException as e:
        logger.warning("TMDB request to %s failed: %s", path, e)
        return None
    except ValueError as e:
        logger.warning("TMDB %s returned invalid JSON: %s", path, e)
        return None

def search_movies(query, api_key=None):
    """
    Search TMDB for films matching a free-text query.

    The request is only sent once iteration starts, and the generator can be
    consumed once.

    Args:
        query: Search text; fewer than two characters yields nothing
        api_key: Optional TMDB key (defaults to Streamlit secrets)

    Yields:
        Dicts with id, title, release_date and poster_path
    """
    if not query or len(query.strip()) < MIN_QUERY_LENGTH:
        return

    data = _get_json("/search/movie", {"query": query.strip(), "include_adult": "false"}, api_key)
    if not data:
        return

    for m in data.get("results", []):
        if not m.get("id") or not m.get("title"):
            continue
        yield {
            "id": m["id"],
            "title": m["title"],
            "release_date": m.get("release_date") or "",
            "poster_path": m.get("poster_path")
        }

def extract_credits(movie_data):
    """
    Pull the headline credits out of a TMDB details record.

    Args:
        movie_data: Details dict with a "credits" entry

    Returns:
        Dict with directors (up to 2), top_cast (first 3) and composers (first unique)
    """
    credits = (movie_data or {}).get("credits")
    if not credits:
        return {}

    cast = credits.get("cast", []) or []
    crew = credits.get("crew", []) or []

    directors = [p.get("name") for p in crew if p.get("job") == "Director" and p.get("name")][:2]
    top_cast = [p.get("name") for p in cast[:3] if p.get("name")]

    composers = []
    for person in crew:
        job = person.get("job", "")
        is_music = job in COMPOSER_JOBS or person.get("department") == "Sound"
        if not is_music or job in EXCLUDED_SOUND_JOBS:
            continue
        name = person.get("name")
        if name and name not in composers:
            composers.append(name)

    return {
        "directors": directors,
        "top_cast": top_cast,
        "composers": composers[:1]
    }

def get_movie_details(movie_id, api_key=None):
    """
    Fetch a film's full record with credits.

    Args:
        movie_id: TMDB film id
        api_key: Optional TMDB key (defaults to Streamlit secrets)

    Returns:
        TMDB details dict plus processed_credits and language_name, or None on failure
    """
    data = _get_json(f"/movie/{movie_id}", {"append_to_response": "credits"}, api_key)
    if not data:
        return None

    details = dict(data)
    details["processed_credits"] = extract_credits(data)
    details["language_name"] = get_language_name(data.get("original_language"))
    return details

def get_popular_movies(api_key=None):
    """Currently popular films, or an empty list when TMDB is unreachable."""
    data = _get_json("/movie/popular", {}, api_key)
    if not data:
        return []
    return data.get("results", [])
