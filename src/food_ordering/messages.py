"""User-facing response messages."""

DISHES_NOT_FOUND = "Страви не знайдено"
DISHES_LOAD_FAILED = "Помилка при отриманні страв"

UNAUTHORIZED = "Неавторизований доступ"

ORDERS_LOAD_FAILED = "Помилка при завантаженні замовлень"
MISSING_ORDER_DATA = "Відсутні дані про користувача або замовлення"
ORDER_SAVE_FAILED = "Помилка при збереженні замовлення"

MISSING_DATA = "Відсутні дані"
DISH_NOT_FOUND = "Страва не знайдена"
RATING_UPDATED = "Оцінка оновлена"
RATING_FAILED = "Помилка при оновленні оцінки"

MISSING_REQUIRED_FIELDS = "Відсутні обов'язкові поля"
SIGNUP_SUCCEEDED = "Користувача успішно створено"
EMAIL_IN_USE = "Обліковий запис з такою електронною поштою вже існує"
SIGNUP_FAILED = "Помилка при створенні користувача"
LOGIN_SUCCEEDED = "Успішний вхід"
INVALID_CREDENTIALS = "Неправильний email або пароль"
LOGOUT_SUCCEEDED = "Успішний вихід"
LOGOUT_FAILED = "Помилка при виході"
USER_LOAD_FAILED = "Помилка при отриманні даних користувача"
