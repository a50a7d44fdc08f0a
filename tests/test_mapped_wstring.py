from dspellutils.mapped_wstring import MappedWstring


def test_identity_mapping():
    m = MappedWstring("abc")
    assert m.to_original_index(2) == 2
    assert m.from_original_index(2) == 2
    assert m.original_length() == len("abc")


def test_explicit_mapping_lookup():
    mapping = [0, 2, 4]
    m = MappedWstring("ab", list(mapping))
    assert m.to_original_index(1) == mapping[1]
    assert m.from_original_index(2) == mapping.index(2)
    assert m.original_length() == mapping[-1]


def test_from_original_index_lower_bound():
    mapping = [0, 2, 4]
    m = MappedWstring("ab", list(mapping))
    assert m.from_original_index(3) == mapping.index(4)


def test_round_trip_through_mapping():
    mapping = [0, 1, 3, 6, 7, 10]
    m = MappedWstring("abcde", list(mapping))
    for i in range(len(mapping)):
        assert m.from_original_index(m.to_original_index(i)) == i


def test_append_inserts_newline_between_non_empty():
    m = MappedWstring("ab", [0, 1])
    m.append(MappedWstring("cd", [5, 6]))
    assert m.text == "ab" + "\n" + "cd"
    assert m.mapping == [0, 1, 5, 6]


def test_append_to_empty_has_no_newline():
    m = MappedWstring()
    m.append(MappedWstring("cd"))
    assert m.text == "cd"
    m.append(MappedWstring())
    assert m.text == "cd"


def test_default_instances_do_not_share_mapping():
    a = MappedWstring()
    b = MappedWstring()
    a.mapping.append(1)
    assert b.mapping == []