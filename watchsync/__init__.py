"""
Mirror a kinopoisk.ru watched listing into a local record file and replay it back.
"""
