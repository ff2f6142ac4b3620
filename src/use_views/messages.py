'''
Everything the tool tells the user: what it is about to do, how to run the
project afterwards, and what to do when the directory isn't a React project.
'''

from . import config
from .project import Platform


def print_intro(platform: Platform):
    print(f"In a few minutes, your {platform.value} project will be ready to use Views! 😇\n")


def print_migrated():
    print("This is already a Views project! 🔥 🎉 \n")


def print_done():
    print("🦄 \n")
    print("This is now a Views project 🎉!!!")
    print("Go ahead and open the file src/Main/App.view in your editor and change something ✏️")
    print(
        "If this is your first time using Views, here's how to get your editor "
        f"to understand Views files {config.SYNTAX_DOCS_URL}"
    )


def print_help(web: bool, yarn: bool = False):
    if web:
        print(f"Run it with {'yarn start' if yarn else 'npm start'}\n")
    else:
        print("Run the iOS simulator with npm run ios and the Android one with npm run android")
        print('''
Sometimes the simulator fails to load. You will want to stop the command by pressing
ctrl+c and running npm start instead.
If the simulator is already open, press the button to try again.

You can also use a real device for testing, https://github.com/react-community/create-react-native-app#npm-run-ios
for more info.''')
    print(f"You can find the docs at {config.DOCS_URL}")
    print_get_in_touch()
    print("Happy coding! :)")


def print_unsupported(project_dir):
    print(
        "It looks like the directory you're on isn't either a create-react-app "
        "or create-react-native-app project."
    )
    print(f"Is {project_dir} the right folder?\n")
    print("If you don't have a project and want to make a new one, follow these instructions:")
    print("For React DOM, ie, a web project:")
    print(f'''npm install --global create-react-app
create-react-app my-app
cd my-app
{config.TOOL_NAME}''')
    print("\nFor React Native, ie, an iOS or Android project:")
    print(f'''npm install --global create-react-native-app
create-react-native-app my-native-app
cd my-native-app
{config.TOOL_NAME}''')
    print_get_in_touch()


def print_get_in_touch():
    print(f"\nIf you need any help, join our Slack community at {config.COMMUNITY_URL}\n")
