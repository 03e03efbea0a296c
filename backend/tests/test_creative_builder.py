from trend_digest.core.creative_builder import (
    build_channel_copy,
    build_studio_tags,
    campaign_label,
    parse_keywords,
)


def test_campaign_label_skips_empty_campaign():
    assert campaign_label("Acme", "Verano", 2024) == "Acme Verano 2024"
    assert campaign_label("Acme", "", 2024) == "Acme 2024"


def test_parse_keywords_trims_and_drops_blanks():
    assert parse_keywords(" zapatos, bolsas ,, ") == ["zapatos", "bolsas"]
    assert parse_keywords("") == []


def test_channel_copy_without_summary():
    copy = build_channel_copy("Acme", "Verano", "", 2024)

    assert copy["channel_a"]["name"] == "Vende Más por Catálogo"
    assert copy["channel_a"]["title"] == "Acme Verano 2024 | Ofertas y Novedades - Vende Más"
    assert copy["channel_a"]["description"].startswith("Descubre lo nuevo de Acme Verano 2024.")
    assert copy["channel_a"]["description"].endswith("#vendemasporcatalogo")

    assert copy["channel_b"]["name"] == "Catálogos Virtuales LATAM"
    assert copy["channel_b"]["title"] == "Acme Verano 2024 | Catálogo Virtual LATAM"
    assert copy["channel_b"]["description"] == (
        "Explora el catálogo virtual de Acme Verano 2024 para toda LATAM. #catalogosvirtualeslatam"
    )


def test_channel_copy_prepends_summary():
    copy = build_channel_copy("Acme", "", "zapatos, bolsas", 2024)

    assert copy["channel_a"]["description"].startswith("zapatos, bolsas\n\nDescubre lo nuevo de Acme 2024.")
    assert copy["channel_b"]["description"].startswith("zapatos, bolsas\n\nExplora")


def test_studio_tags_extend_with_summary_keywords():
    tags = build_studio_tags("Acme", "Verano", "zapatos, bolsas", 2024)

    assert tags == [
        "catalogo Acme Verano 2024",
        "Acme 2024",
        "Acme mexico",
        "ofertas Acme",
        "zapatos Acme",
        "bolsas Acme",
    ]
