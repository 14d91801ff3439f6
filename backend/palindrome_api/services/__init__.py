# Services package init
"""
Palindrome API — Services Package
==================================

    - palindrome.py:  is_palindrome() predicate (pure, no I/O)
    - word_store.py:  WordStore persistence layer + get_word_store dependency
"""
