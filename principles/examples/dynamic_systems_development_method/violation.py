"""
DSDM - violation

No priorities, no timeboxes, no phase gates. Work starts on social media
integration before login, new requirements arrive mid-flight (and get
mis-numbered), and the project is deployed on a deadline with its core
features half done.
"""

project = {}
progress = {}


def start_project():
    global project, progress
    project = {
        "name": "Customer Portal",
        "requirements": [
            {"id": "REQ-001", "description": "User login and authentication"},
            {"id": "REQ-002", "description": "View account details"},
            {"id": "REQ-003", "description": "Update personal information"},
            {"id": "REQ-004", "description": "View order history"},
            {"id": "REQ-005", "description": "Track order status"},
            {"id": "REQ-006", "description": "Cancel orders"},
            {"id": "REQ-007", "description": "Save favorite products"},
            {"id": "REQ-008", "description": "Integration with social media"},
        ],
        "status": "In Progress",
    }
    progress = {req["id"]: 0 for req in project["requirements"]}
    print(f"Starting project: {project['name']}")
    print("Working on all requirements simultaneously...")


def update_progress(requirement_id, percent):
    if requirement_id in progress:
        progress[requirement_id] = percent
        print(f"Requirement {requirement_id} is {percent}% complete")
    else:
        print(f"Requirement {requirement_id} not found")


def add_requirement(description):
    req_id = f"REQ-{len(project['requirements']) + 1}"  # REQ-9, not REQ-009
    project["requirements"].append({"id": req_id, "description": description})
    progress[req_id] = 0
    print(f"Added new requirement: {req_id} - {description}")


def change_requirement(requirement_id, description):
    req = next((r for r in project["requirements"] if r["id"] == requirement_id), None)
    if req:
        print(f'Changing requirement {requirement_id} from "{req["description"]}" to "{description}"')
        req["description"] = description
    else:
        print(f"Requirement {requirement_id} not found")


def deploy_project():
    average = sum(progress.values()) / len(progress)
    print(f"Deploying project with average completion of {average:.1f}%")
    project["status"] = "Deployed"


def main():
    start_project()
    update_progress("REQ-003", 30)
    update_progress("REQ-007", 50)
    update_progress("REQ-008", 70)

    print("\n--- Week 3: Stakeholder Intervention ---")
    print("Stakeholder: \"Why isn't the login working yet? That's the most important feature!\"")
    update_progress("REQ-001", 20)

    print("\n--- Week 4: Scope Creep ---")
    add_requirement("Multi-factor authentication")
    add_requirement("Password reset functionality")
    add_requirement("User profile pictures")
    change_requirement("REQ-004", "View and filter detailed order history with sorting options")
    update_progress("REQ-001", 40)
    update_progress("REQ-009", 30)
    update_progress("REQ-002", 20)

    print("\n--- Week 8: Deadline Approaching ---")
    print('Manager: "We need to deploy next week no matter what!"')
    update_progress("REQ-001", 90)
    update_progress("REQ-002", 60)
    update_progress("REQ-004", 40)

    print("\n--- Week 9: Premature Deployment ---")
    deploy_project()

    print("\n--- Week 10: Post-Deployment Issues ---")
    print('Customer Support: "Users can\'t log in properly and are getting errors when viewing orders"')
    print("\n--- Project Outcome ---")
    print("- Core functionality incomplete or buggy")
    print(f"- Social media integration (never needed) got {progress['REQ-008']}%")
    print("- Additional time and cost needed for fixes")


if __name__ == "__main__":
    main()
