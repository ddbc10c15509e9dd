from me_tool.schemas.base import FormSchema


class LoginForm(FormSchema):
    email: str
    password: str
    redirect_to: str = "/"
