from verse_phonetics.core import (
    build_rhyme_index,
    extract_rhyme_key,
    parse_cmu_dict,
    select_pronunciation,
)


def test_index_groups_words_by_canonical_key(sample_dictionary):
    index = build_rhyme_index(sample_dictionary)

    assert index["AY-M"] == ("time", "dime", "rhyme")
    assert index["AY-N-D"] == ("kind", "mind")
    assert index["EH-D"] == ("read", "bed")
    assert index["IY-D"] == ("bead",)


def test_homograph_contributes_only_its_canonical_key(sample_dictionary):
    index = build_rhyme_index(sample_dictionary)

    appearances = [key for key, words in index.items() if "read" in words]
    assert appearances == ["EH-D"]
    assert index.key_for("read") == "EH-D"


def test_longest_variant_drives_the_key(sample_dictionary):
    index = build_rhyme_index(sample_dictionary)

    assert index.key_for("poem") == "OW-AH-M"
    assert index.rhymes_for("poem") == ["proem"]


def test_keyless_words_are_left_out(sample_dictionary):
    index = build_rhyme_index(sample_dictionary)

    assert index.key_for("hmm") is None
    assert all("hmm" not in words for words in index.values())
    assert index.keyless_words == 1


def test_rhymes_exclude_the_query_word(sample_dictionary):
    index = build_rhyme_index(sample_dictionary)

    assert index.rhymes_for("time") == ["dime", "rhyme"]
    assert index.rhymes_for("bead") == []


def test_unknown_and_keyless_words_return_empty(sample_dictionary):
    index = build_rhyme_index(sample_dictionary)

    assert index.rhymes_for("orange") == []
    assert index.rhymes_for("hmm") == []
    assert index.words_for_key("ZZ") == ()


def test_every_grouped_word_rederives_its_key(sample_dictionary):
    index = build_rhyme_index(sample_dictionary)

    for key, words in index.items():
        for word in words:
            canonical = select_pronunciation(sample_dictionary[word])
            assert extract_rhyme_key(canonical.phones) == key


def test_unstressed_only_words_fall_back_to_last_vowel():
    dictionary = parse_cmu_dict("THE  DH AH0\nA  AH0\nUH  AH1\n")
    index = build_rhyme_index(dictionary)

    assert index["AH"] == ("the", "a", "uh")
