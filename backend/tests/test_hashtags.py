import pytest

from trend_digest.core.hashtags import (
    backfill_hashtags,
    derived_hashtags,
    distribute_hashtags,
    normalize_tag,
    rank_tags,
    to_hashtag,
)

FIXED_A = "#vendemasporcatalogo"
FIXED_B = "#catalogosvirtualeslatam"


def test_normalize_tag_keeps_spanish_letters_and_hyphens():
    assert normalize_tag("  Ofertas-Día ¡YA!  ") == "ofertas-día ya"
    assert normalize_tag("#Acme2024") == "#acme2024"
    assert normalize_tag("NIÑOS & Niñas") == "niños  niñas"


def test_normalize_tag_drops_letters_outside_the_allowed_set():
    assert normalize_tag("façade") == "faade"
    assert normalize_tag("日本") == ""


@pytest.mark.parametrize("raw", ["Oferta", "#Verano_2024!", "  Año Nuevo  ", "ÜBER-cool", "çà et là", "emoji 🎉 tag"])
def test_normalize_tag_is_idempotent(raw):
    once = normalize_tag(raw)
    assert normalize_tag(once) == once


def test_to_hashtag_folds_accents_and_removes_spaces():
    assert to_hashtag("catalogo Acme") == "#catalogoAcme"
    assert to_hashtag("Año Nuevo") == "#AnoNuevo"
    assert to_hashtag("#ofertas-día") == "#ofertasdia"
    assert to_hashtag("  ") == "#"


def test_rank_tags_orders_by_frequency_then_first_seen():
    tags = ["b", "a", "B", "c", "a", "b", "!!!"]
    assert rank_tags(tags) == ["b", "a", "c"]


def test_distribute_hashtags_alternates_and_starts_with_fixed_tags():
    ranked = ["#uno", "dos", "#tres", "cuatro"]
    result_a, result_b = distribute_hashtags(ranked, FIXED_A, FIXED_B)

    assert result_a == [FIXED_A, "#uno", "#tres"]
    assert result_b == [FIXED_B, "#dos", "#cuatro"]


def test_distribute_hashtags_skips_duplicates_and_fixed_tags():
    ranked = ["#vendemasporcatalogo", "oferta", "#oferta", "catalogos virtuales latam"]
    result_a, result_b = distribute_hashtags(ranked, FIXED_A, FIXED_B)

    assert result_a == [FIXED_A, "#oferta"]
    assert result_b == [FIXED_B]


def test_distribute_hashtags_caps_both_lists():
    ranked = [f"tag{i}" for i in range(30)]
    result_a, result_b = distribute_hashtags(ranked, FIXED_A, FIXED_B, limit=7)

    assert len(result_a) == 7
    assert len(result_b) == 7
    assert result_a[0] == FIXED_A
    assert result_b[0] == FIXED_B
    assert not set(result_a) & set(result_b)


def test_backfill_prefers_channel_a_and_never_duplicates():
    result_a, result_b = [FIXED_A], [FIXED_B]
    backfill_hashtags(result_a, result_b, derived_hashtags("Acme", "Verano", 2024), limit=7)

    assert result_a == [FIXED_A, "#catalogoAcme", "#AcmeVerano", "#Acme2024", "#Acmemexico"]
    assert result_b == [FIXED_B]


def test_backfill_spills_into_channel_b_when_a_is_full():
    result_a = [FIXED_A, "#a1", "#a2", "#a3", "#a4", "#a5"]
    result_b = [FIXED_B, "#b1"]
    backfill_hashtags(result_a, result_b, derived_hashtags("Acme", "", 2024), limit=7)

    assert result_a == [FIXED_A, "#a1", "#a2", "#a3", "#a4", "#a5", "#catalogoAcme"]
    assert result_b == [FIXED_B, "#b1", "#Acme", "#Acme2024", "#Acmemexico"]


def test_normalize_tag_keeps_unicode_whitespace():
    assert normalize_tag("a\u00a0b") == "a\u00a0b"
    assert normalize_tag("Oferta\u2028Día") == "oferta\u2028día"
    assert normalize_tag("\u00a0oferta\u00a0") == "oferta"


def test_to_hashtag_removes_unicode_whitespace():
    assert to_hashtag("Acme\u00a0Verano") == "#AcmeVerano"
