# ABOUTME: Shelfkeeper package root.
# ABOUTME: A personal library tracker for books and the loans made of them.
