"""Game-over modal: shows the final score and collects a nickname."""
import pygame

MAX_NICKNAME = 16

class NicknamePrompt:
    def __init__(self):
        self.active=False
        self.score=0
        self.text=""

    def open(self, score: int):
        self.active=True; self.score=score; self.text=""

    def close(self):
        self.active=False; self.text=""

    def handle(self, e):
        """Feed a KEYDOWN event. Returns "submit", "cancel" or None."""
        if e.key==pygame.K_ESCAPE: return "cancel"
        if e.key in (pygame.K_RETURN,pygame.K_KP_ENTER): return "submit"
        if e.key==pygame.K_BACKSPACE: self.text=self.text[:-1]; return None
        ch=getattr(e,"unicode","")
        if ch and ch.isprintable() and len(self.text)<MAX_NICKNAME:
            self.text+=ch
        return None

    @property
    def nickname(self) -> str:
        return self.text.strip()

    def draw(self,screen,font,big_font,w,h):
        if not self.active: return
        s=pygame.Surface((w-80,200),pygame.SRCALPHA); s.fill((20,25,40,230))
        top=(h-200)//2
        screen.blit(s,(40,top))
        lines=[
            (big_font,"GAME OVER",(255,220,220)),
            (font,f"Final score: {self.score}",(200,210,240)),
            (font,f"Nickname: {self.text}_",(255,255,255)),
            (font,"Enter save  •  Esc cancel",(165,175,215)),
        ]
        y=top+20
        for f,txt,col in lines:
            surf=f.render(txt,True,col)
            screen.blit(surf,surf.get_rect(midtop=(w//2,y))); y+=surf.get_height()+14
