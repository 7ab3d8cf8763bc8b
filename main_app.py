"""
Movie Club - SPACE Film Reviews
Score films on Story, Pageantry, Amusement, Captivation and Emotion,
and keep an eye on how well calibrated your scores are.
"""

import streamlit as st
import sys
import os
import logging

# =============================================================================
# CONFIGURATION
# =============================================================================

APP_NAME = "Movie Club"
DATA_DIR = os.getenv("MOVIECLUB_DATA_DIR", "movieclub_data")

SEVERITY_RENDERERS = {
    "info": st.info,
    "warning": st.warning,
    "error": st.error,
    "success": st.success
}

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

# =============================================================================
# IMPORTS AND SETUP
# =============================================================================

# Add src directory to path for imports
current_dir = os.path.dirname(os.path.abspath(__file__))
src_dir = os.path.join(current_dir, 'src')

if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from utils import (
    SPACE_DIMENSIONS, SPACE_DIMENSION_NAMES, SPACE_DIMENSION_DESCRIPTIONS,
    SCORE_LABELS, MAX_REVIEW_TEXT_LENGTH, get_image_url,
    validate_scores, validate_review_text
)
from local_storage import JsonFileStorage
from review_store import ReviewStore
from film_catalog import search_movies, get_movie_details
from review_export import build_share_text, build_credits_line, get_review_peaks
from seed_data import SEED_REVIEWS

# =============================================================================
# SESSION STATE MANAGEMENT
# =============================================================================

def initialize_session_state():
    """Initialize all required session state variables."""

    # One store per browser session
    if "review_store" not in st.session_state:
        st.session_state.review_store = ReviewStore(JsonFileStorage(DATA_DIR))

    if "selected_film" not in st.session_state:
        st.session_state.selected_film = None

    # Caches
    if "details_cache" not in st.session_state:
        st.session_state.details_cache = {}

def get_store():
    return st.session_state.review_store

# =============================================================================
# UI STYLING
# =============================================================================

def inject_custom_css():
    """Inject custom CSS for score chips and review cards."""
    st.markdown("""
    <style>
    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}

    .club-title {
        text-align: center;
        font-size: 2.5rem;
        font-weight: bold;
        color: #d4a017;
        margin-bottom: 0.5rem;
    }

    .space-chip {
        display: inline-block;
        padding: 0.2rem 0.6rem;
        margin-right: 0.3rem;
        border-radius: 6px;
        background: #2b2b2b;
        color: #f5f0e1;
        font-weight: bold;
    }

    .space-chip.peak {
        background: #d4a017;
        color: #1a1a1a;
    }

    .credits-line {
        color: #888;
        font-size: 0.9rem;
    }
    </style>
    """, unsafe_allow_html=True)

# =============================================================================
# CORE FUNCTIONS
# =============================================================================

def fetch_film_details(film):
    """Film details from TMDB, cached per session; falls back to the search record."""
    cache = st.session_state.details_cache
    if film["id"] not in cache:
        details = get_movie_details(film["id"])
        if details is None:
            st.warning("Couldn't load full details for this film; benchmarks may be limited.")
            return film
        cache[film["id"]] = details
    return cache[film["id"]]

def submit_review(film, scores, text):
    """Validate the form and hand the review to the store."""
    try:
        scores = validate_scores(scores)
        text = validate_review_text(text)
    except ValueError as e:
        st.error(f"❌ {e}")
        return False

    get_store().save_review(film["id"], film, scores, text)
    return True

def render_score_chips(scores):
    peaks = get_review_peaks(scores)
    chips = "".join(
        f'<span class="space-chip{" peak" if dim in peaks else ""}">{dim} {scores.get(dim, "-")}</span>'
        for dim in SPACE_DIMENSIONS
    )
    st.markdown(chips, unsafe_allow_html=True)

# =============================================================================
# UI COMPONENTS
# =============================================================================

def render_search():
    """Search TMDB and pick a film to review."""
    query = st.text_input("Search for a film", key="film_search")

    if not query or len(query.strip()) < 2:
        return

    results = list(search_movies(query))[:10]
    if not results:
        st.info(f"No films found for '{query}'.")
        return

    cols = st.columns(5)
    for idx, film in enumerate(results):
        with cols[idx % 5]:
            poster_url = get_image_url(film.get("poster_path"), "w200")
            if poster_url:
                st.image(poster_url, use_container_width=True)
            year = film["release_date"][:4]
            st.write(f"**{film['title']}**" + (f" ({year})" if year else ""))

            label = "Edit review" if film["id"] in get_store() else "Review"
            if st.button(label, key=f"pick_{film['id']}"):
                st.session_state.selected_film = fetch_film_details(film)
                st.rerun()

def render_benchmarks(film, scores):
    """Compare the form's scores with the user's peer-group and overall modes."""
    benchmarks = get_store().get_benchmark_modes(film)

    if not benchmarks["genre_mode"] and not benchmarks["overall_mode"]:
        st.caption("Review at least 3 films to unlock benchmarks.")
        return

    rows = []
    for dim in SPACE_DIMENSIONS:
        row = {"Dimension": SPACE_DIMENSION_NAMES[dim], "This film": scores[dim]}
        if benchmarks["genre_mode"]:
            row[f"Typical {benchmarks['genre_mode_label']}"] = benchmarks["genre_mode"][dim]
        if benchmarks["overall_mode"]:
            row[f"Your typical ({benchmarks['overall_count']} films)"] = benchmarks["overall_mode"][dim]
        rows.append(row)

    st.markdown("#### 📊 Benchmarks")
    st.dataframe(rows, hide_index=True, use_container_width=True)

def render_review_form(film):
    """Five SPACE sliders, a short note and the benchmark comparison."""
    existing = get_store().get_review(film["id"])
    defaults = (existing or {}).get("scores") or {dim: 3 for dim in SPACE_DIMENSIONS}

    header_cols = st.columns([1, 4])
    with header_cols[0]:
        poster_url = get_image_url(film.get("poster_path"), "w154")
        if poster_url:
            st.image(poster_url)
    with header_cols[1]:
        st.markdown(f"### {film.get('title', 'Untitled')}")
        meta = [part for part in [
            (film.get("release_date") or "")[:4],
            f"{film['runtime']} min" if film.get("runtime") else "",
            film.get("language_name", "")
        ] if part]
        st.write(" • ".join(meta))
        credits_line = build_credits_line(film)
        if credits_line:
            st.markdown(f'<div class="credits-line">{credits_line}</div>', unsafe_allow_html=True)

    scores = {}
    for dim in SPACE_DIMENSIONS:
        scores[dim] = st.slider(
            f"{dim} · {SPACE_DIMENSION_NAMES[dim]}",
            min_value=1, max_value=5, value=int(defaults.get(dim, 3)),
            help=SPACE_DIMENSION_DESCRIPTIONS[dim],
            key=f"score_{film['id']}_{dim}"
        )
        st.caption(SCORE_LABELS[scores[dim]])

    text = st.text_area(
        "Notes (optional)",
        value=(existing or {}).get("text", ""),
        max_chars=MAX_REVIEW_TEXT_LENGTH,
        key=f"text_{film['id']}"
    )

    render_benchmarks(film, scores)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("✅ Save review", type="primary", key="save_review"):
            if submit_review(film, scores, text):
                st.session_state.selected_film = None
                st.success(f"✅ Saved {film.get('title', 'review')}")
                st.rerun()
    with col2:
        if st.button("Cancel", key="cancel_review"):
            st.session_state.selected_film = None
            st.rerun()

def render_review_card(review):
    film = review.get("film_metadata") or {}
    with st.container(border=True):
        cols = st.columns([1, 5])
        with cols[0]:
            poster_url = get_image_url(film.get("poster_path"), "w154")
            if poster_url:
                st.image(poster_url)
        with cols[1]:
            year = (film.get("release_date") or "")[:4]
            st.markdown(f"**{film.get('title', review['film_id'])}**" + (f" ({year})" if year else ""))
            render_score_chips(review["scores"])
            if review.get("text"):
                st.write(review["text"])

            action_cols = st.columns(3)
            with action_cols[0]:
                if st.button("✏️ Edit", key=f"edit_{review['film_id']}"):
                    st.session_state.selected_film = dict(film, id=film.get("id", review["film_id"]))
                    st.rerun()
            with action_cols[1]:
                if st.button("🗑️ Delete", key=f"delete_{review['film_id']}"):
                    get_store().delete_review(review["film_id"])
                    st.rerun()
            with action_cols[2]:
                with st.popover("📤 Share"):
                    st.code(build_share_text(review), language=None)

def render_my_reviews():
    store = get_store()
    reviews = store.get_all_reviews()

    if not reviews:
        st.info("No reviews yet. Search for a film to get started, or load the sample reviews.")
    else:
        st.download_button(
            "⬇️ Download reviews (CSV)",
            data=store.export_reviews_csv(),
            file_name="movieclub_reviews.csv",
            mime="text/csv"
        )
        for review in reviews:
            render_review_card(review)

    if st.button(f"Load {len(SEED_REVIEWS)} sample reviews", key="load_seed"):
        added = store.load_seed_data(SEED_REVIEWS)
        st.success(f"Added {added} sample reviews; your own reviews were kept.")
        st.rerun()

def render_calibration():
    """Score distribution against the target shape, plus the advisory."""
    report = get_store().get_calibration_report()

    st.markdown("### 🎯 Your Calibration")
    if report["total"] == 0:
        st.write("Start reviewing films to see your score distribution.")
        return

    st.caption(f"{report['total']} scores across {report['review_count']} reviews")

    for score in sorted(SCORE_LABELS, reverse=True):
        pct = report["percentages"][score]
        target = report["expected_percentages"][score]
        st.write(f"**{score}** {SCORE_LABELS[score]} · {pct:.0f}% / target {target:.0f}%")
        st.progress(min(pct, 100) / 100)

    if report["p_value"] is not None:
        st.caption(f"χ² = {report['chi_squared']:.2f}, p = {report['p_value']:.3f}")

    advisory = report["advisory"]
    SEVERITY_RENDERERS.get(advisory["severity"], st.info)(advisory["message"])

def render_dimension_deep_dive():
    store = get_store()
    if not len(store):
        st.info("Review some films first.")
        return

    dimension = st.selectbox(
        "Dimension",
        SPACE_DIMENSIONS,
        format_func=lambda d: f"{d} · {SPACE_DIMENSION_NAMES[d]}"
    )
    insights = store.get_dimension_insights(dimension)

    st.markdown(f"### {dimension} · {insights['name']}")
    st.caption(SPACE_DIMENSION_DESCRIPTIONS[dimension])

    col1, col2, col3 = st.columns(3)
    col1.metric("Average", f"{insights['average']:.1f}")
    col2.metric("Films scored", insights["count"])
    col3.metric("Share of 5s", f"{insights['five_percentage']:.0f}%")

    if insights["is_over_indexing"]:
        st.info(f"You score {insights['name']} higher than your other dimensions.")
    elif insights["is_under_indexing"]:
        st.info(f"You score {insights['name']} lower than your other dimensions.")

    st.bar_chart({str(score): [count] for score, count in insights["distribution"].items()})

    if insights["peak_films"]:
        st.markdown("**Peak films**")
        for review in insights["peak_films"]:
            st.write(f"- {(review.get('film_metadata') or {}).get('title', review['film_id'])}")

# =============================================================================
# MAIN APPLICATION
# =============================================================================

def main():
    """Main application function."""
    st.set_page_config(
        page_title=APP_NAME,
        page_icon="🎬",
        layout="wide"
    )

    initialize_session_state()
    inject_custom_css()

    st.markdown(f'<h1 class="club-title">🎬 {APP_NAME}</h1>', unsafe_allow_html=True)

    view = st.sidebar.radio("View", ["Review a film", "My reviews", "Dimensions"])

    with st.sidebar:
        render_calibration()

    if view == "Review a film":
        if st.session_state.selected_film:
            render_review_form(st.session_state.selected_film)
        else:
            render_search()
    elif view == "My reviews":
        if st.session_state.selected_film:
            render_review_form(st.session_state.selected_film)
        else:
            render_my_reviews()
    else:
        render_dimension_deep_dive()

if __name__ == "__main__":
    main()
