from minpq.utils.misc import oneline


def test_oneline():
    assert oneline("abc") == "abc"
    assert oneline("  abc  ") == "abc"
    assert oneline(
        """
        Value 'x' is already in the priority queue;
        use update_priority to change its priority"""
    ) == (
        "Value 'x' is already in the priority queue; "
        "use update_priority to change its priority"
    )
    assert oneline("\n\n  a\n\n  b  \n") == "a b"
