"""
Thesaurus: flat-file synonym dictionary.

Every line of the synonym file is a word followed by its synonyms:
`big|large,huge`.  Words may be looked up, added, and removed, synonyms may be
added and removed, and the whole dictionary may be sorted ignoring case.
"""
