"""Interface-level constants for the taskpane TUI/CLI."""

INPUT_LIMIT_TAG = 15
INPUT_LIMIT_PROJECT = 20
INPUT_LIMIT_TASK = 150

LANG_PACK = {
    "en": {
        "TITLE_PROJECTS": "Projects",
        "TITLE_TASKS": "Tasks",
        "TITLE_TAGS": "Tags",
        "TAGS_NONE": "None",
        "EMPTY_PROJECTS": "No projects created yet.",
        "EMPTY_TASKS": "No tasks added to this project yet.",
        "EMPTY_CTA": "Press N to create one.",
        "EMPTY_TAGS": "No matching tags. Ctrl+N creates one.",
        "PROMPT_NEW_TAG": "New Tag",
        "PROMPT_NEW_PROJECT": "New Project",
        "PROMPT_NEW_TASK": "New Task",
        "PROMPT_ADD_TAG": "Add tag to task",
        "PROMPT_SEARCH": "Search: ",
        "CONFIRM_TITLE": "Confirmation required",
        "CONFIRM_BODY": "Proceed with {action}?",
        "CONFIRM_DELETE_TAG": "deleting selected tag",
        "CONFIRM_DELETE_PROJECT": "deleting selected project",
        "CONFIRM_DELETE_TASK": "deleting selected task",
        "KEY_CANCEL": "cancel",
        "KEY_CONTINUE": "continue",
        "KEY_SELECT": "select",
        "KEY_UP": "up",
        "KEY_DOWN": "down",
        "KEY_CREATE_TAG": "create tag",
        "KEY_DELETE_TAG": "delete tag",
        "KEY_NEW": "new",
        "KEY_DELETE": "delete",
        "KEY_TAG": "tag",
        "KEY_FOCUS_TASKS": "tasks",
        "KEY_FOCUS_PROJECTS": "projects",
        "KEY_QUIT": "quit",
        "ERR_STORAGE": "Storage error: {error}",
        "LIST_EMPTY": "(no projects)",
    },
    "ru": {
        "TITLE_PROJECTS": "Проекты",
        "TITLE_TASKS": "Задачи",
        "TITLE_TAGS": "Теги",
        "TAGS_NONE": "Нет",
        "EMPTY_PROJECTS": "Проектов пока нет.",
        "EMPTY_TASKS": "В проекте пока нет задач.",
        "EMPTY_CTA": "Нажмите N, чтобы создать.",
        "EMPTY_TAGS": "Нет подходящих тегов. Ctrl+N создаст новый.",
        "PROMPT_NEW_TAG": "Новый тег",
        "PROMPT_NEW_PROJECT": "Новый проект",
        "PROMPT_NEW_TASK": "Новая задача",
        "PROMPT_ADD_TAG": "Добавить тег к задаче",
        "PROMPT_SEARCH": "Поиск: ",
        "CONFIRM_TITLE": "Требуется подтверждение",
        "CONFIRM_BODY": "Продолжить: {action}?",
        "CONFIRM_DELETE_TAG": "удаление выбранного тега",
        "CONFIRM_DELETE_PROJECT": "удаление выбранного проекта",
        "CONFIRM_DELETE_TASK": "удаление выбранной задачи",
        "KEY_CANCEL": "отмена",
        "KEY_CONTINUE": "продолжить",
        "KEY_SELECT": "выбрать",
        "KEY_NEW": "создать",
        "KEY_DELETE": "удалить",
        "KEY_QUIT": "выход",
        "ERR_STORAGE": "Ошибка хранилища: {error}",
    },
}
