"""
Separation of Concerns - violation

handle_user does everything: parses a raw form, validates, stores into a
module-level dict, formats HTML and prints it. Changing the storage, the
rules or the output format all mean editing the same function, and none
of them can be tested without the others.
"""

USERS = {}


def handle_user(form):
    parts = dict(pair.split("=", 1) for pair in form.split("&"))
    username, email = parts.get("username", ""), parts.get("email", "")
    age = int(parts.get("age", "0") or 0)

    if len(username) < 3:
        print("<p class='error'>Username must be at least 3 characters long</p>")
        return
    if "@" not in email:
        print("<p class='error'>Email must be valid</p>")
        return
    if age < 18:
        print("<p class='error'>User must be at least 18 years old</p>")
        return

    user_id = len(USERS) + 1
    USERS[user_id] = {"username": username, "email": email, "age": age}

    html = "<ul>"
    for uid, user in USERS.items():
        html += f"<li>{uid}: {user['username']} ({user['email']})</li>"
    html += "</ul>"
    print(html)


def main():
    USERS.clear()
    handle_user("username=johndoe&email=john@example.com&age=30")
    handle_user("username=janedoe&email=jane@example.com&age=25")
    handle_user("username=kid&email=kid@example.com&age=12")
    print("Want JSON instead of HTML, or a database instead of USERS? Rewrite handle_user.")


if __name__ == "__main__":
    main()
