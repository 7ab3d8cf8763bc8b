"""
Sample reviews for a fresh install, loadable with ReviewStore.load_seed_data.
"""

from utils import get_language_name

GENRES = {
    12: "Adventure",
    14: "Fantasy",
    16: "Animation",
    18: "Drama",
    28: "Action",
    35: "Comedy",
    36: "History",
    80: "Crime",
    878: "Science Fiction",
    10402: "Music",
    10749: "Romance",
    10752: "War"
}

def _seed(film_id, title, release_date, poster_path, language, genre_ids, scores, text, created_at):
    return {
        "film_id": str(film_id),
        "film_metadata": {
            "id": film_id,
            "title": title,
            "release_date": release_date,
            "poster_path": poster_path,
            "original_language": language,
            "language_name": get_language_name(language),
            "genres": [{"id": g, "name": GENRES[g]} for g in genre_ids]
        },
        "scores": dict(zip("SPACE", scores)),
        "text": text,
        "created_at": created_at
    }

_SEEDS = [
    _seed(157336, "Interstellar", "2014-11-05", "/gEU2QniE6E77NI6lCU6MxlNBvIx.jpg", "en", [12, 18, 878],
          (4, 5, 3, 4, 5),
          "Gargantua alone earns the Pageantry 5. The video-message scene wrecks you; the ending divides.",
          "2024-01-15T10:00:00Z"),
    _seed(597, "Titanic", "1997-11-18", "/9xjZS2rlVxm8SFx8kPC3aIGCOYQ.jpg", "en", [18, 10749],
          (3, 5, 3, 3, 5),
          "A simple love story carried by a staggering sinking sequence. Mass emotional impact.",
          "2024-01-14T10:00:00Z"),
    _seed(122, "The Lord of the Rings: The Return of the King", "2003-12-01", "/rCzpDGLbOoPwLjy3OAm5NUPOTrC.jpg",
          "en", [12, 14, 28],
          (4, 5, 3, 4, 5),
          "Pelennor Fields and the Grey Havens. A trilogy's worth of payoff in one film.",
          "2024-01-13T10:00:00Z"),
    _seed(769, "GoodFellas", "1990-09-12", "/aKuFiU82s5ISJpGZp7YkIr3kCUd.jpg", "en", [18, 80],
          (5, 4, 5, 5, 3),
          "Voiceover, fractured timeline, the Copacabana shot. Every mob film since answers to it.",
          "2024-01-12T10:00:00Z"),
    _seed(155, "The Dark Knight", "2008-07-16", "/qJ2tW6WMUDux911r6m7haRef0WH.jpg", "en", [18, 28, 80],
          (4, 4, 4, 5, 4),
          "Tight and escalating, lifted to greatness by a Joker you cannot look away from.",
          "2024-01-11T10:00:00Z"),
    _seed(639, "When Harry Met Sally...", "1989-07-21", "/3Oc6u2sKjRBLupGDkKoyPE4Sk5X.jpg", "en", [35, 10749, 18],
          (5, 2, 5, 4, 4),
          "The template for the modern romcom, built on wit alone. Endlessly quotable.",
          "2024-01-10T10:00:00Z"),
    _seed(299534, "Avengers: Endgame", "2019-04-24", "/or06FN3Dka5tukK1e9sl16pB3iy.jpg", "en", [12, 878, 28],
          (3, 3, 4, 3, 3),
          "A satisfying finale whose emotion is borrowed from a decade of other films.",
          "2024-01-09T10:00:00Z"),
    _seed(301528, "Baahubali 2: The Conclusion", "2017-04-26", "/qPfFKy67NQmlusBUvJDxPdiwjUL.jpg", "te", [28, 18],
          (3, 5, 5, 3, 4),
          "Indian spectacle on its own visual terms. Mahishmati feels like a real place.",
          "2024-01-08T10:00:00Z"),
    _seed(19666, "Sholay", "1975-08-15", "/n9beTIhkhHPVwRWXCTqMqGPnkjy.jpg", "hi", [28, 12, 35],
          (5, 3, 5, 4, 3),
          "The ensemble template, Gabbar Singh, and fifty years of rewatchability.",
          "2024-01-07T10:00:00Z"),
    _seed(19665, "Deewar", "1975-01-24", "/7bNexU9sWCcR4OR7cPnmzAnxSCl.jpg", "hi", [28, 80, 18],
          (5, 2, 2, 5, 4),
          "Two brothers on opposite sides of the law. The screenplay that defined a decade.",
          "2024-01-06T10:00:00Z"),
    _seed(70825, "Abhimaan", "1973-07-20", "/8LQSkfqVUg9J7vJpXf1hwYPqWhc.jpg", "hi", [18, 10402],
          (3, 2, 3, 3, 3),
          "A quiet marriage drama; the deliberately flat song is the heartbreaker.",
          "2024-01-05T10:00:00Z"),
    _seed(70815, "Aradhana", "1969-09-26", "/vmUGBVwJBdvqFOFCjftasY0xJko.jpg", "hi", [18, 10749],
          (3, 2, 3, 5, 4),
          "The film that made a superstar. Pure screen presence and timeless songs.",
          "2024-01-04T10:00:00Z"),
    _seed(598, "City of God", "2002-02-05", "/k7eYdWvhYQyRQoU2TB2A2Xu2TfD.jpg", "pt", [18, 80],
          (5, 4, 4, 4, 4),
          "A whole community told through crime across decades. Compulsive despite the brutality.",
          "2024-01-03T10:00:00Z"),
    _seed(80281, "Rebellion", "2011-11-16", "/s9tDYBplyoqDsuLnGe2bvvYwBTL.jpg", "fr", [18, 36],
          (3, 3, 2, 3, 4),
          "Procedural and grim. Good intentions ground down by political machinery.",
          "2024-01-02T10:00:00Z"),
    _seed(4762, "Persepolis", "2007-06-27", "/pXgT7Dx7dirMhCnqS3SLOXuPtzZ.jpg", "fr", [16, 18],
          (3, 5, 3, 3, 4),
          "Bold black-and-white animation proving the form can be personal and political.",
          "2024-01-01T10:00:00Z"),
    _seed(652, "Troy", "2004-05-13", "/edMlij7nw2NMla32xskDnzMCFBM.jpg", "en", [12, 36, 10752],
          (3, 3, 3, 3, 3),
          "Competent everywhere, transcendent nowhere. Priam's plea is the highlight.",
          "2023-12-31T10:00:00Z"),
    _seed(1495, "Kingdom of Heaven", "2005-05-03", "/3PmlHaXMjiCy29Qn5mevn69LKL.jpg", "en", [18, 28, 12],
          (3, 5, 3, 3, 3),
          "Watch the director's cut. The siege of Jerusalem is staggering; the lead is not.",
          "2023-12-30T10:00:00Z"),
    _seed(57361, "Thalapathi", "1991-06-21", "/yGihkRWvXfBQi5YmvAVww8LxpHl.jpg", "ta", [28, 80, 18],
          (4, 3, 3, 5, 4),
          "Two towering screen presences bound by loyalty into tragedy.",
          "2023-12-29T10:00:00Z"),
]

SEED_REVIEWS = {review["film_id"]: review for review in _SEEDS}
